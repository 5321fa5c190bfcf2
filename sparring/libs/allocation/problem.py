"""
Formulates the draw for a spar as a 0/1 integer program.

Every participant gets one binary variable per (candidate room, role), and
every candidate room gets a binary "is this room in use" variable. The hard
constraints admit exactly the valid British Parliamentary draws; the
objective (minimised) trades off:

    * the rating difference between every pair of teams in a room
    * the spread of ratings within a team (optional)
    * how evenly judges are spread over the rooms, plus the number of judges
    * the number of rooms in use
    * mutual partner preferences being honoured (rewarded)
"""
import itertools
import logging
import math
from collections import namedtuple

import pulp
from django.conf import settings

from sparring.libs.allocation.types import Role

logger = logging.getLogger(__name__)

SPEAKERS_PER_ROOM = 8
TEAM_SIZE = 2
MAX_JUDGES_PER_ROOM = 100
# keeps the per-team max/min rating variables bounded
RATING_BOX_MARGIN = 100.0


AllocationWeights = namedtuple("AllocationWeights", [
    "team_balance",
    "speaker_spread",
    "judge_balance",
    "room_count",
    "partner_preference",
])

DEFAULT_WEIGHTS = AllocationWeights(
    team_balance=0.5,
    speaker_spread=0.0,
    judge_balance=1.0,
    room_count=5.0,
    partner_preference=20.0,
)


def max_rooms(signups):
    """The number of candidate rooms: enough for every willing speaker"""
    speakers = sum(1 for signup in signups.values() if signup.as_speaker)
    return int(math.ceil(speakers / float(SPEAKERS_PER_ROOM)))


def abs_difference(model, a, b, name):
    """
    Returns a non-negative variable which is at least |a - b|. Minimising it
    (with a positive weight) makes it equal to |a - b|.
    """
    difference = pulp.LpVariable(name, lowBound=0)
    model += difference >= a - b, name + "_pos"
    model += difference >= b - a, name + "_neg"
    return difference


def mutual_partner_pairs(signups):
    """
    Pairs of speakers who both asked to be partnered with each other, each
    pair listed once. One-sided, dangling and self preferences are ignored.
    """
    pairs = []
    for participant_id in sorted(signups, key=str):
        partner_id = signups[participant_id].partner_preference
        if partner_id is None:
            continue
        if partner_id == participant_id:
            logger.warning("Participant %s asked to be partnered with themselves",
                           participant_id)
            continue
        if partner_id not in signups:
            logger.warning("Participant %s asked to be partnered with %s, who "
                           "has not signed up", participant_id, partner_id)
            continue
        if signups[partner_id].partner_preference != participant_id:
            logger.debug("Partner preference %s -> %s is not mutual",
                         participant_id, partner_id)
            continue
        if not (signups[participant_id].as_speaker and signups[partner_id].as_speaker):
            continue
        if str(participant_id) < str(partner_id):
            pairs.append((participant_id, partner_id))
    return pairs


class AllocationProblem(object):
    def __init__(self, signups, ratings, weights=None, default_rating=None):
        if default_rating is None:
            default_rating = settings.DEFAULT_RATING

        self.signups = signups
        self.weights = weights or DEFAULT_WEIGHTS
        self.participants = sorted(signups, key=str)
        self.ratings = {
            participant_id: float(ratings.get(participant_id, default_rating))
            for participant_id in self.participants
        }
        self.rooms = list(range(max_rooms(signups)))

        self.model = pulp.LpProblem("spar_allocation", pulp.LpMinimize)
        self.x = {}
        self.u = {}
        # (room, team) -> (max_on_team, min_on_team), only with a spread weight
        self.spread = {}

    def describe(self):
        return ("{} participants, {} candidate rooms, {} variables, "
                "{} constraints, weights {}").format(
                    len(self.participants), len(self.rooms),
                    len(self.model.variables()), self.model.numConstraints(),
                    dict(self.weights._asdict()))

    def build(self):
        for participant_id in self.participants:
            signup = self.signups[participant_id]
            assert signup.participant_id == participant_id, \
                "Signup for {} is keyed under {}".format(
                    signup.participant_id, participant_id)
            assert signup.as_judge or signup.as_speaker, \
                "Participant {} is neither judging nor speaking".format(participant_id)
        assert self.rooms, "No candidate rooms: nobody is willing to speak"

        self._add_variables()
        self._add_eligibility_constraints()
        self._add_placement_constraints()
        self._add_room_constraints()

        weights = self.weights
        objective = [
            weights.team_balance * self._team_balance_term(),
            weights.judge_balance * self._judge_balance_term(),
            weights.room_count * pulp.lpSum(self.u.values()),
        ]
        if weights.speaker_spread:
            objective.append(-weights.speaker_spread * self._speaker_spread_term())
        if weights.partner_preference > 0:
            objective.append(-weights.partner_preference * self._partner_preference_term())
        self.model += pulp.lpSum(objective), "objective"

        logger.info("Built allocation problem: %s", self.describe())
        return self

    def _add_variables(self):
        for room in self.rooms:
            self.u[room] = pulp.LpVariable("u_{}".format(room), cat=pulp.LpBinary)

        for index, participant_id in enumerate(self.participants):
            for room in self.rooms:
                for role in Role:
                    name = "x_{}_{}_{}".format(index, room, role.value)
                    self.x[(participant_id, room, role)] = pulp.LpVariable(
                        name, cat=pulp.LpBinary)

    def _add_eligibility_constraints(self):
        for index, participant_id in enumerate(self.participants):
            signup = self.signups[participant_id]
            for room in self.rooms:
                if not signup.as_judge:
                    self.model += (self.x[(participant_id, room, Role.JUDGE)] == 0,
                                   "no_judge_{}_{}".format(index, room))
                if not signup.as_speaker:
                    for team in Role.teams():
                        self.model += (
                            self.x[(participant_id, room, team)] == 0,
                            "no_speak_{}_{}_{}".format(index, room, team.value))

    def _add_placement_constraints(self):
        for index, participant_id in enumerate(self.participants):
            positions = pulp.lpSum(self.x[(participant_id, room, role)]
                                   for room in self.rooms for role in Role)
            self.model += positions == 1, "place_{}".format(index)

    def _add_room_constraints(self):
        for room in self.rooms:
            in_use = self.u[room]
            for team in Role.teams():
                count = self._count(room, team)
                self.model += (count <= TEAM_SIZE * in_use,
                               "team_max_{}_{}".format(room, team.value))
                self.model += (count >= in_use,
                               "team_min_{}_{}".format(room, team.value))

            judges = self._count(room, Role.JUDGE)
            self.model += judges >= in_use, "judges_min_{}".format(room)
            self.model += (judges <= MAX_JUDGES_PER_ROOM * in_use,
                           "judges_max_{}".format(room))

    def _count(self, room, role):
        return pulp.lpSum(self.x[(participant_id, room, role)]
                          for participant_id in self.participants)

    def _team_rating(self, room, team):
        return pulp.lpSum(self.ratings[participant_id] * self.x[(participant_id, room, team)]
                          for participant_id in self.participants)

    def _team_balance_term(self):
        differences = []
        for room in self.rooms:
            for first, second in itertools.combinations(Role.teams(), 2):
                differences.append(abs_difference(
                    self.model,
                    self._team_rating(room, first),
                    self._team_rating(room, second),
                    "team_diff_{}_{}_{}".format(room, first.value, second.value)))
        return pulp.lpSum(differences)

    def _speaker_spread_term(self):
        """
        Sum over rooms and team slots of the highest minus the lowest rating
        on the team.

        The highest rating is bounded below by every assigned speaker and
        bounded above by one selected assigned speaker, so it is exact in
        both optimisation directions (the lowest rating mirrors this). Slots
        of unused rooms select nobody and are pinned to a spread of 0.
        Unassigned speakers are relaxed out with a big-M the size of the
        rating box.
        """
        lowest = min(self.ratings.values()) - RATING_BOX_MARGIN
        highest = max(self.ratings.values()) + RATING_BOX_MARGIN
        big_m = highest - lowest
        speakers = [(index, participant_id)
                    for index, participant_id in enumerate(self.participants)
                    if self.signups[participant_id].as_speaker]

        spread = []
        for room in self.rooms:
            in_use = self.u[room]
            for team in Role.teams():
                suffix = "{}_{}".format(room, team.value)
                max_on_team = pulp.LpVariable("max_rating_" + suffix,
                                              lowBound=lowest, upBound=highest)
                min_on_team = pulp.LpVariable("min_rating_" + suffix,
                                              lowBound=lowest, upBound=highest)
                self.spread[(room, team)] = (max_on_team, min_on_team)

                is_max, is_min = [], []
                for index, participant_id in speakers:
                    assigned = self.x[(participant_id, room, team)]
                    rating = self.ratings[participant_id]
                    name = "{}_{}".format(suffix, index)

                    self.model += (max_on_team >= rating - big_m * (1 - assigned),
                                   "max_rating_lb_" + name)
                    self.model += (min_on_team <= rating + big_m * (1 - assigned),
                                   "min_rating_ub_" + name)

                    selected_max = pulp.LpVariable("is_max_" + name, cat=pulp.LpBinary)
                    selected_min = pulp.LpVariable("is_min_" + name, cat=pulp.LpBinary)
                    self.model += selected_max <= assigned, "is_max_assigned_" + name
                    self.model += selected_min <= assigned, "is_min_assigned_" + name
                    self.model += (max_on_team <= rating + big_m * (1 - selected_max),
                                   "max_rating_ub_" + name)
                    self.model += (min_on_team >= rating - big_m * (1 - selected_min),
                                   "min_rating_lb_" + name)
                    is_max.append(selected_max)
                    is_min.append(selected_min)

                self.model += pulp.lpSum(is_max) == in_use, "one_max_" + suffix
                self.model += pulp.lpSum(is_min) == in_use, "one_min_" + suffix
                self.model += max_on_team >= min_on_team, "spread_nonneg_" + suffix
                self.model += (max_on_team - min_on_team <= big_m * in_use,
                               "spread_unused_" + suffix)
                spread.append(max_on_team - min_on_team)
        return pulp.lpSum(spread)

    def _judge_balance_term(self):
        judge_counts = [self._count(room, Role.JUDGE) for room in self.rooms]
        differences = []
        for first, second in itertools.combinations(self.rooms, 2):
            differences.append(abs_difference(
                self.model, judge_counts[first], judge_counts[second],
                "judge_diff_{}_{}".format(first, second)))
        return pulp.lpSum(differences) + pulp.lpSum(judge_counts)

    def _partner_preference_term(self):
        index_of = {participant_id: index
                    for index, participant_id in enumerate(self.participants)}
        together = []
        for first, second in mutual_partner_pairs(self.signups):
            for room in self.rooms:
                for team in Role.teams():
                    name = "pair_{}_{}_{}_{}".format(index_of[first], index_of[second],
                                                     room, team.value)
                    paired = pulp.LpVariable(name, cat=pulp.LpBinary)
                    self.model += paired <= self.x[(first, room, team)], name + "_a"
                    self.model += paired <= self.x[(second, room, team)], name + "_b"
                    together.append(paired)
        return pulp.lpSum(together)


def build_problem(signups, ratings, weights=None, default_rating=None):
    """
    Build the integer program for the given signups (participant id ->
    Signup) and ratings (participant id -> float). Participants without a
    rating use the default rating.
    """
    return AllocationProblem(signups, ratings, weights=weights,
                             default_rating=default_rating).build()
