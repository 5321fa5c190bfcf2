from django.core.exceptions import ImproperlyConfigured
from django.test import TestCase
import pytest

from sparring.apps.spar.models import SparSeriesMember
from sparring.libs.allocation.types import Role
from sparring.libs.ratings import (
    RoomResult,
    compute_ratings,
    load_room_results,
    rate_rooms,
    rating_model,
)
from sparring.libs.tests.helpers import (
    create_room,
    create_series,
    create_spar,
    submit_ballot,
)

OG, OO, CG, CO = Role.teams()


def room_result(room_id, scores, first_member=1):
    """Two speakers per team, numbered from first_member in speaking order"""
    teams = {}
    member_id = first_member
    for team in Role.teams():
        teams[team] = []
        for score in scores[team]:
            teams[team].append((member_id, score))
            member_id += 1
    return RoomResult(room_id, teams)


ORDERED_SCORES = {OG: [80, 80], OO: [78, 78], CG: [76, 76], CO: [74, 74]}


class TestRateRooms(object):

    def test_no_history(self):
        ratings = rate_rooms([1, 2, 3], [])
        assert ratings == {1: 25.0, 2: 25.0, 3: 25.0}

    def test_winners_go_up(self):
        ratings = rate_rooms(range(1, 9), [room_result(1, ORDERED_SCORES)])
        assert ratings[1] > ratings[3] > ratings[5] > ratings[7]
        assert ratings[1] > 25.0 > ratings[7]

    def test_every_speaker_gets_their_own_teams_update(self):
        ratings = rate_rooms(range(1, 9), [room_result(1, ORDERED_SCORES)])
        assert ratings[1] == ratings[2]
        assert ratings[3] == ratings[4]
        assert ratings[5] == ratings[6]
        assert ratings[7] == ratings[8]
        assert ratings[6] != ratings[8]

    def test_deterministic(self):
        history = [
            room_result(1, ORDERED_SCORES),
            room_result(2, {OG: [70, 71], OO: [80, 79], CG: [75, 75], CO: [77, 60]}),
            room_result(3, {OG: [70], OO: [80], CG: [75, 75], CO: [77, 72]},
                        first_member=3),
        ]
        first = rate_rooms(range(1, 9), history)
        second = rate_rooms(range(1, 9), history)
        assert first == second

    def test_tied_room_is_skipped(self):
        tied = room_result(1, {OG: [80, 80], OO: [80, 80], CG: [76, 76], CO: [74, 74]})
        ratings = rate_rooms(range(1, 9), [tied])
        assert set(ratings.values()) == {25.0}

    def test_room_with_empty_team_is_skipped(self):
        result = room_result(1, {OG: [80, 80], OO: [78, 78], CG: [76, 76], CO: []})
        ratings = rate_rooms(range(1, 7), [result])
        assert set(ratings.values()) == {25.0}

    def test_speakers_without_a_member_are_rated(self):
        ratings = rate_rooms([], [room_result(1, ORDERED_SCORES)])
        assert sorted(ratings) == list(range(1, 9))

    def test_default_rating(self, settings):
        settings.DEFAULT_RATING = 1500.0
        assert rate_rooms([1], []) == {1: 1500.0}

    def test_unknown_model(self, settings):
        settings.RATING_MODEL = "Elo"
        with pytest.raises(ImproperlyConfigured):
            rating_model()

    @pytest.mark.parametrize("name", ["BradleyTerryFull", "ThurstoneMostellerPart"])
    def test_other_models(self, settings, name):
        settings.RATING_MODEL = name
        ratings = rate_rooms(range(1, 9), [room_result(1, ORDERED_SCORES)])
        assert ratings[1] > ratings[7]


@pytest.mark.django_db
class TestComputeRatings(TestCase):
    """Ratings computed from the ballots stored for a series"""

    pytestmark = pytest.mark.django_db

    def setUp(self):
        super().setUp()
        self.series = create_series()
        self.spar = create_spar(self.series, judges=1, speakers=8)
        members = list(SparSeriesMember.objects.order_by("id"))
        self.judge, self.speakers = members[0], members[1:]
        self.teams = {
            team: self.speakers[2 * i:2 * i + 2]
            for i, team in enumerate(Role.teams())
        }

    def test_without_ballots(self):
        ratings = compute_ratings(self.series.id)
        assert len(ratings) == 9
        assert set(ratings.values()) == {25.0}

    def test_with_ballot(self):
        room = create_room(self.spar, self.judge, self.teams)
        submit_ballot(room, ORDERED_SCORES)
        ratings = compute_ratings(self.series.id)
        og = [ratings[member.id] for member in self.teams[OG]]
        co = [ratings[member.id] for member in self.teams[CO]]
        assert min(og) > 25.0 > max(co)
        assert ratings[self.judge.id] == 25.0

    def test_latest_ballot_is_used(self):
        room = create_room(self.spar, self.judge, self.teams)
        submit_ballot(room, ORDERED_SCORES)
        submit_ballot(room, {OG: [74, 74], OO: [76, 76], CG: [78, 78], CO: [80, 80]})
        results = load_room_results(self.series.id)
        assert len(results) == 1
        assert results[0].teams[CO][0][1] == 80

        ratings = compute_ratings(self.series.id)
        assert ratings[self.teams[CO][0].id] > 25.0

    def test_other_series_ignored(self):
        other = create_series(title="Other")
        other_spar = create_spar(other, judges=1, speakers=8)
        members = list(other.members.order_by("id"))
        room = create_room(other_spar, members[0], {
            team: members[1 + 2 * i:3 + 2 * i]
            for i, team in enumerate(Role.teams())
        })
        submit_ballot(room, ORDERED_SCORES)
        assert load_room_results(self.series.id) == []
        assert len(load_room_results(other.id)) == 1
