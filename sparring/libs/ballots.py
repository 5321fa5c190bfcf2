"""Turning British Parliamentary ballots into team rankings"""
import itertools

from django.core.exceptions import ValidationError

from sparring.libs.allocation.types import Role
from sparring.libs.errors import TiedBallotError

MIN_SPEAK = 50
MAX_SPEAK = 100


def team_totals(scores_by_team):
    """
    Arguments:
    scores_by_team (dict) -- Role -> list of speaker scores for that team

    Returns:
    totals (dict) -- Role -> summed speaker scores
    """
    return {team: sum(scores) for team, scores in scores_by_team.items()}


def bp_ranking(totals):
    """
    Orders the four teams from first to fourth place by total speaks.

    Raises TiedBallotError if two teams have the same total, as a BP ballot
    has no way of breaking the tie.
    """
    if set(totals) != set(Role.teams()):
        raise ValueError("A BP ballot needs totals for exactly the four teams, "
                         "got {}".format(sorted(team.value for team in totals)))
    for first, second in itertools.combinations(Role.teams(), 2):
        if totals[first] == totals[second]:
            raise TiedBallotError((first, second))
    return sorted(Role.teams(), key=lambda team: -totals[team])


def ranks_of(totals):
    """Role -> place (1 for the winning team, 4 for the last)"""
    return {team: place
            for place, team in enumerate(bp_ranking(totals), start=1)}


def validate_ballot(scores_by_team):
    """Raises ValidationError for ballots that could not be ranked"""
    errors = []
    for team, scores in scores_by_team.items():
        for score in scores:
            if not MIN_SPEAK <= score <= MAX_SPEAK:
                errors.append("{} has a speaker score of {}, which is outside of "
                              "{}-{}".format(team.label, score, MIN_SPEAK, MAX_SPEAK))
    if errors:
        raise ValidationError(errors)

    try:
        bp_ranking(team_totals(scores_by_team))
    except (TiedBallotError, ValueError) as e:
        raise ValidationError(str(e)) from e
