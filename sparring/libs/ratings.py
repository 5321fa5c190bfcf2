"""
Estimates how strong each member of a spar series is, so that the draw can
put evenly matched teams in the same room and pair strong speakers with
weaker ones.

Ratings come from a multi-team Weng-Lin update (the openskill models),
which copes with four teams of one or two speakers per room. They are
recomputed from the full ballot history every time and never shown to
members, so the model can be swapped out without anyone noticing.
"""
import logging
from collections import namedtuple

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from openskill import models as openskill_models

from sparring.apps.spar.models import SparRoom, SparSeriesMember
from sparring.libs.allocation.types import Role
from sparring.libs.ballots import ranks_of, team_totals
from sparring.libs.errors import TiedBallotError

logger = logging.getLogger(__name__)

RATING_MODELS = (
    "BradleyTerryFull",
    "BradleyTerryPart",
    "PlackettLuce",
    "ThurstoneMostellerFull",
    "ThurstoneMostellerPart",
)

# teams maps each Role to a list of (member id, speaker score)
RoomResult = namedtuple("RoomResult", ["room_id", "teams"])


def rating_model(default_rating=None):
    if default_rating is None:
        default_rating = settings.DEFAULT_RATING
    name = settings.RATING_MODEL
    if name not in RATING_MODELS:
        raise ImproperlyConfigured(
            "RATING_MODEL must be one of {}, not {!r}".format(RATING_MODELS, name))
    model_class = getattr(openskill_models, name)
    return model_class(mu=default_rating, sigma=default_rating / 3.0)


def rate_rooms(member_ids, room_results, model=None):
    """
    Run the rating update over `room_results` in order.

    Arguments:
    member_ids (iterable) -- everyone who should get a rating, even without
                             any history
    room_results (iterable of RoomResult) -- rooms in the order their
                                            results were finalised
    model -- an openskill model; defaults to rating_model()

    Returns:
    ratings (dict) -- member id -> rating (the model's mu)
    """
    if model is None:
        model = rating_model()
    ratings = {member_id: model.rating() for member_id in member_ids}

    for result in room_results:
        if not all(result.teams.get(team) for team in Role.teams()):
            logger.warning("Skipping room %s when computing ratings: not every "
                           "team has speakers", result.room_id)
            continue
        try:
            ranks = ranks_of(team_totals({
                team: [score for _, score in result.teams[team]]
                for team in Role.teams()
            }))
        except TiedBallotError as e:
            logger.error("Skipping room %s when computing ratings: %s",
                         result.room_id, e)
            continue

        for team in Role.teams():
            for member_id, _ in result.teams[team]:
                if member_id not in ratings:
                    ratings[member_id] = model.rating()

        teams = [[ratings[member_id] for member_id, _ in result.teams[team]]
                 for team in Role.teams()]
        new_teams = model.rate(teams, ranks=[ranks[team] for team in Role.teams()])

        for team, new_team in zip(Role.teams(), new_teams):
            for (member_id, _), new_rating in zip(result.teams[team], new_team):
                ratings[member_id] = new_rating
        logger.debug("Updated ratings for room %s (ranks %s)", result.room_id,
                     {team.value: rank for team, rank in ranks.items()})

    return {member_id: rating.mu for member_id, rating in ratings.items()}


def load_room_results(series_id):
    """
    Every room of the series with a ballot, as RoomResults ordered by when
    their (canonical) ballot was submitted.
    """
    rooms = SparRoom.objects.filter(
        spar__series_id=series_id,
        ballots__isnull=False,
    ).distinct()

    results = []
    for room in rooms:
        ballot = room.canonical_ballot()
        results.append((ballot.created_at, room.id,
                        RoomResult(room.id, ballot.scores_by_team())))
    results.sort(key=lambda result: (result[0], result[1]))
    return [result for _, _, result in results]


def compute_ratings(series_id):
    member_ids = SparSeriesMember.objects.filter(
        series_id=series_id,
    ).order_by("id").values_list("id", flat=True)
    room_results = load_room_results(series_id)
    logger.info("Computing ratings for series %s from %d rooms",
                series_id, len(room_results))
    return rate_rooms(list(member_ids), room_results)
