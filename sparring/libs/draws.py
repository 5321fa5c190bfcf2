import logging
import time

from django.db import transaction

from sparring.apps.spar.models import (
    DraftDraw,
    SparAdjudicator,
    SparRoom,
    SparSettings,
    SparSpeaker,
    SparTeam,
)
from sparring.apps.tasks.models import Task
from sparring.libs import ratings
from sparring.libs.allocation import (
    AllocationWeights,
    DEFAULT_WEIGHTS,
    build_problem,
    max_rooms,
    reconstruct_rooms,
    rooms_to_json,
    solve,
    validate_draw,
)
from sparring.libs.allocation.problem import MAX_JUDGES_PER_ROOM, SPEAKERS_PER_ROOM
from sparring.libs.allocation.types import Role
from sparring.libs.errors import (
    DrawGenerationFailedError,
    DrawNotReadyError,
    DrawReleasedError,
    NotEnoughJudgesError,
    NotEnoughSpeakersError,
)

logger = logging.getLogger(__name__)

MIN_SPEAKERS = 4


def get_allocation_weights():
    return AllocationWeights(**{
        name: SparSettings.get(f"allocation_{name}_weight", default)
        for name, default in DEFAULT_WEIGHTS._asdict().items()
    })


def _can_fill_rooms(judges_only, speakers_only, both, room_limit):
    for rooms in range(1, room_limit + 1):
        for speaking in range(both + 1):
            speakers = speakers_only + speaking
            judges = judges_only + both - speaking
            if (MIN_SPEAKERS * rooms <= speakers <= SPEAKERS_PER_ROOM * rooms
                    and rooms <= judges <= MAX_JUDGES_PER_ROOM * rooms):
                return True
    return False


def check_capacity(signups):
    """
    Raises a CapacityError if no valid draw exists for these signups, before
    any time is spent building or solving the problem.
    """
    speakers = sum(1 for s in signups.values() if s.as_speaker)
    judges = sum(1 for s in signups.values() if s.as_judge)
    speakers_only = sum(1 for s in signups.values() if s.as_speaker and not s.as_judge)
    judges_only = sum(1 for s in signups.values() if s.as_judge and not s.as_speaker)
    both = speakers - speakers_only

    if speakers < MIN_SPEAKERS:
        raise NotEnoughSpeakersError(
            f"Too few speakers for a British Parliamentary spar: {speakers} "
            f"signed up to speak, but at least {MIN_SPEAKERS} are needed.")

    if judges * SPEAKERS_PER_ROOM < speakers_only:
        raise NotEnoughJudgesError(
            f"Too few people willing to judge: {judges} can judge, but "
            f"{speakers_only} people only want to speak and each room of up to "
            f"{SPEAKERS_PER_ROOM} speakers needs a judge.")

    if not _can_fill_rooms(judges_only, speakers_only, both, max_rooms(signups)):
        raise NotEnoughJudgesError(
            f"Can't split {len(signups)} people into rooms with at least one "
            f"judge and {MIN_SPEAKERS}-{SPEAKERS_PER_ROOM} speakers each.")


def build_and_solve(signups, ratings_by_id, weights=None, time_limit=None):
    problem = build_problem(signups, ratings_by_id, weights=weights)
    return solve(problem, time_limit=time_limit)


def generate_rooms(spar, weights=None, time_limit=None):
    """
    Runs the whole allocation for a spar: ratings, capacity check, solve,
    validation and reconstruction. Returns room index -> Room.
    """
    start = time.time()
    signups = spar.allocation_signups()
    check_capacity(signups)

    member_ratings = ratings.compute_ratings(spar.series_id)
    if weights is None:
        weights = get_allocation_weights()

    assignments = build_and_solve(signups, member_ratings, weights=weights,
                                  time_limit=time_limit)
    validate_draw(signups, assignments)
    rooms = reconstruct_rooms(assignments)
    logger.info("Generated %d rooms for spar %s in %.2fs", len(rooms),
                spar.public_id, time.time() - start)
    return rooms


def request_draft(spar, queue=True):
    """
    Creates an empty draft draw for the spar and, unless `queue` is False,
    queues its generation. Capacity problems are raised straight away so they
    can be shown to the person asking for the draw.
    """
    check_capacity(spar.allocation_signups())
    with transaction.atomic():
        draft = DraftDraw.objects.create(spar=spar,
                                         version=DraftDraw.next_version(spar))
        if queue:
            Task.enqueue(Task.GENERATE_DRAFT, draft.public_id)
    logger.info("Created draft %s (version %d) for spar %s", draft.public_id,
                draft.version, spar.public_id)
    return draft


def complete_draft(draft_public_id):
    draft = DraftDraw.objects.select_related("spar").get(public_id=draft_public_id)
    if draft.is_ready:
        logger.info("Draft %s has already been generated", draft_public_id)
        return draft

    rooms = generate_rooms(draft.spar)
    updated = DraftDraw.objects.filter(
        pk=draft.pk, data__isnull=True,
    ).update(data=rooms_to_json(rooms))
    if not updated:
        logger.warning("Draft %s was filled in while it was being generated",
                       draft_public_id)
    draft.refresh_from_db()
    return draft


def generation_failure(draft):
    """The error message of the failed generation of a pending draft, if any"""
    if draft.is_ready:
        return None
    task = Task.most_recent_run(Task.GENERATE_DRAFT, draft.public_id)
    # still queued or running
    if task is None or not task.is_terminated():
        return None
    if task.status == Task.FAILED:
        return task.error_message or "unknown error"
    return None


def confirm_draft(draft):
    """Replaces the rooms of the draft's spar with the rooms of the draft"""
    if not draft.is_ready:
        failure = generation_failure(draft)
        if failure is not None:
            raise DrawGenerationFailedError(failure)
        raise DrawNotReadyError()
    spar = draft.spar
    if spar.release_draw:
        raise DrawReleasedError()

    rooms = draft.rooms()
    with transaction.atomic():
        SparRoom.objects.filter(spar=spar).delete()
        for index in sorted(rooms):
            room = rooms[index]
            spar_room = SparRoom.objects.create(spar=spar)
            for member_id in sorted(room.panel):
                SparAdjudicator.objects.create(room=spar_room,
                                               member_id=member_id,
                                               status=SparAdjudicator.PANELLIST)
            for team in Role.teams():
                spar_team = SparTeam.objects.create(room=spar_room,
                                                    position=team.position)
                for member_id in sorted(room.teams.get(team, ())):
                    SparSpeaker.objects.create(team=spar_team, member_id=member_id)
    logger.info("Confirmed draft %s for spar %s (%d rooms)", draft.public_id,
                spar.public_id, len(rooms))
    return spar.rooms.all()
