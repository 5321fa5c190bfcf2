import json

from sparring.libs.allocation.types import Assignment, Role, Room

DRAW_FORMAT_VERSION = 1


def reconstruct_rooms(assignments):
    """
    Group a participant id -> Assignment map into room index -> Room.

    Room indices are the labels used while building the problem and carry no
    meaning beyond telling rooms apart.
    """
    rooms = {}
    for participant_id, assignment in assignments.items():
        room = rooms.setdefault(assignment.room, Room())
        if assignment.is_judge:
            room.panel.add(participant_id)
        else:
            room.teams.setdefault(assignment.role, set()).add(participant_id)
    return rooms


def _sorted_ids(ids):
    return sorted(ids, key=lambda participant_id: (str(type(participant_id)), participant_id))


def rooms_to_json(rooms):
    rooms_data = []
    for index in sorted(rooms):
        room = rooms[index]
        rooms_data.append({
            "index": index,
            "panel": _sorted_ids(room.panel),
            "teams": {
                team.value: _sorted_ids(room.teams[team])
                for team in Role.teams() if team in room.teams
            },
        })
    return json.dumps({"version": DRAW_FORMAT_VERSION, "rooms": rooms_data},
                      indent=2, sort_keys=True)


def rooms_from_json(data):
    parsed = json.loads(data)
    version = parsed.get("version")
    if version != DRAW_FORMAT_VERSION:
        raise ValueError("Unsupported draw format version: {}".format(version))

    rooms = {}
    for room_data in parsed["rooms"]:
        teams = {Role(team): members
                 for team, members in room_data["teams"].items()}
        if Role.JUDGE in teams:
            raise ValueError("Judges belong on the panel, not in a team")
        rooms[room_data["index"]] = Room(panel=room_data["panel"], teams=teams)
    return rooms


def assignments_of_rooms(rooms):
    """Flatten rooms back into a participant id -> Assignment map"""
    assignments = {}
    for index, room in rooms.items():
        for participant_id in room.panel:
            assignments[participant_id] = Assignment.judge(index)
        for team, members in room.teams.items():
            for participant_id in members:
                assignments[participant_id] = Assignment.team(index, team)
    return assignments
