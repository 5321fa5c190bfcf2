from sparring.libs.allocation.problem import MAX_JUDGES_PER_ROOM, TEAM_SIZE, max_rooms
from sparring.libs.allocation.rooms import reconstruct_rooms
from sparring.libs.allocation.types import Role
from sparring.libs.errors import InvalidDrawError


def draw_violations(signups, assignments):
    """
    Every way in which `assignments` fails to be a valid draw for
    `signups`, as human readable strings. An empty list means the draw is
    valid.
    """
    violations = []

    unplaced = [p for p in signups if p not in assignments]
    if unplaced:
        violations.append("not placed: {}".format(sorted(unplaced, key=str)))
    unknown = [p for p in assignments if p not in signups]
    if unknown:
        violations.append("placed without signing up: {}".format(sorted(unknown, key=str)))

    room_limit = max_rooms(signups)
    for participant_id, assignment in assignments.items():
        if not 0 <= assignment.room < room_limit:
            violations.append("{} placed in room {}, outside of the {} candidate rooms".format(
                participant_id, assignment.room, room_limit))
        signup = signups.get(participant_id)
        if signup is None:
            continue
        if assignment.is_judge and not signup.as_judge:
            violations.append("{} is judging but only signed up to speak".format(participant_id))
        if not assignment.is_judge and not signup.as_speaker:
            violations.append("{} is speaking but only signed up to judge".format(participant_id))

    for index, room in sorted(reconstruct_rooms(assignments).items()):
        if not room.panel:
            violations.append("room {} has no judges".format(index))
        if len(room.panel) > MAX_JUDGES_PER_ROOM:
            violations.append("room {} has {} judges".format(index, len(room.panel)))
        for team in Role.teams():
            members = room.teams.get(team, set())
            if not 1 <= len(members) <= TEAM_SIZE:
                violations.append("room {} has {} speakers in {}".format(
                    index, len(members), team.value))
    return violations


def validate_draw(signups, assignments):
    violations = draw_violations(signups, assignments)
    if violations:
        raise InvalidDrawError(violations)
