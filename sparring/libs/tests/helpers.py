"""Collection of useful methods for building signups, spars and ballots"""

import datetime
import random

from django.utils import timezone

from sparring.apps.spar.models import (
    AdjudicatorBallot,
    BallotScore,
    Spar,
    SparAdjudicator,
    SparRoom,
    SparSeries,
    SparSeriesMember,
    SparSignup,
    SparSpeaker,
    SparTeam,
)
from sparring.libs.allocation.types import Role, Signup


def generate_participants(judges, speakers, both):
    """
    Builds signups with consecutive ids, starting from 0: first the
    dedicated judges, then the dedicated speakers, then the people happy to
    do either.

    Returns:
    signups (dict) -- participant id -> Signup
    """
    signups = {}
    for _ in range(judges):
        signups[len(signups)] = Signup(len(signups), True, False)
    for _ in range(speakers):
        signups[len(signups)] = Signup(len(signups), False, True)
    for _ in range(both):
        signups[len(signups)] = Signup(len(signups), True, True)
    return signups


def flat_ratings(signups, rating=25.0):
    return {participant_id: rating for participant_id in signups}


def generate_population(seed, max_people=20):
    """
    A random signup population (with random ratings), reproducible from the
    seed.

    Returns:
    (signups, ratings) -- participant id -> Signup, participant id -> float
    """
    rng = random.Random(seed)
    judges = rng.randint(0, max_people // 4)
    speakers = rng.randint(4, max_people // 2)
    both = rng.randint(0, max_people // 4)
    signups = generate_participants(judges, speakers, both)
    ratings = {participant_id: rng.uniform(15.0, 35.0)
               for participant_id in signups}
    return signups, ratings


def create_series(title="Tuesday spars", members=0):
    series = SparSeries.objects.create(title=title)
    for i in range(members):
        SparSeriesMember.objects.create(series=series, name="Member {}".format(i))
    return series


def create_spar(series, judges=0, speakers=0, both=0):
    """
    Creates a spar in `series` along with a new member and signup for every
    requested participant, ordered the same way as generate_participants.
    """
    spar = Spar.objects.create(
        series=series,
        start_time=timezone.now() + datetime.timedelta(days=1),
    )
    offset = series.members.count()
    flags = ([(True, False)] * judges + [(False, True)] * speakers +
             [(True, True)] * both)
    for i, (as_judge, as_speaker) in enumerate(flags):
        member = SparSeriesMember.objects.create(
            series=series, name="Participant {}".format(offset + i))
        SparSignup.objects.create(spar=spar, member=member, as_judge=as_judge,
                                  as_speaker=as_speaker)
    return spar


def create_room(spar, adjudicator, teams):
    """
    Arguments:
    spar (Spar model) -- the spar the room belongs to
    adjudicator (SparSeriesMember model) -- the chair of the room
    teams (dict) -- Role -> list of SparSeriesMember, in speaking order

    Returns:
    room (SparRoom model)
    """
    room = SparRoom.objects.create(spar=spar)
    SparAdjudicator.objects.create(room=room, member=adjudicator,
                                   status=SparAdjudicator.CHAIR)
    for team in Role.teams():
        spar_team = SparTeam.objects.create(room=room, position=team.position)
        for member in teams.get(team, ()):
            SparSpeaker.objects.create(team=spar_team, member=member)
    return room


def submit_ballot(room, scores):
    """
    Arguments:
    room (SparRoom model) -- a room created by create_room
    scores (dict) -- Role -> list of speaker scores, in speaking order

    Returns:
    ballot (AdjudicatorBallot model)
    """
    ballot = AdjudicatorBallot.objects.create(
        room=room, adjudicator=room.adjudicators.first())
    for team in room.teams.all():
        speakers = team.speakers.order_by("id")
        for speaker, score in zip(speakers, scores.get(team.role, ())):
            BallotScore.objects.create(ballot=ballot, speaker=speaker, score=score)
    return ballot
