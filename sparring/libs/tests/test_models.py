from django.core.exceptions import ValidationError
from django.test import TestCase
import pytest

from sparring.apps.spar.models import DraftDraw, SparSettings
from sparring.libs.allocation import Role, Signup
from sparring.libs.tests.helpers import (
    create_room,
    create_series,
    create_spar,
    submit_ballot,
)

OG, OO, CG, CO = Role.teams()


@pytest.mark.django_db
class TestSparModels(TestCase):

    pytestmark = pytest.mark.django_db

    def setUp(self):
        super().setUp()
        self.series = create_series()
        self.spar = create_spar(self.series, judges=1, speakers=8)
        self.signups = list(self.spar.signups.order_by("member_id"))

    def test_allocation_signups(self):
        signups = self.spar.allocation_signups()
        judge = self.signups[0]
        assert len(signups) == 9
        assert signups[judge.member_id] == Signup(judge.member_id, True, False)

    def test_partner_preference(self):
        first, second = self.signups[1], self.signups[2]
        first.partner_preference = second.member
        first.save()
        signup = self.spar.allocation_signups()[first.member_id]
        assert signup.partner_preference == second.member_id

    def test_signup_needs_a_role(self):
        signup = self.signups[1]
        signup.as_speaker = False
        with pytest.raises(ValidationError):
            signup.clean()

    def test_signup_cannot_prefer_themselves(self):
        signup = self.signups[1]
        signup.partner_preference = signup.member
        with pytest.raises(ValidationError):
            signup.clean()

    def test_judges_cannot_ask_for_partners(self):
        signup = self.signups[0]
        signup.partner_preference = self.signups[1].member
        with pytest.raises(ValidationError):
            signup.clean()

    def test_open_spar_accepts_signups(self):
        self.signups[1].clean()

    def test_closed_spar_rejects_signups(self):
        signup = self.signups[1]
        signup.spar.is_open = False
        with pytest.raises(ValidationError):
            signup.clean()

    def test_released_spar_rejects_signups(self):
        signup = self.signups[1]
        signup.spar.release_draw = True
        with pytest.raises(ValidationError):
            signup.clean()

    def test_settings(self):
        with pytest.raises(ValueError):
            SparSettings.get("allocation_room_count_weight")
        assert SparSettings.get("allocation_room_count_weight", 5.0) == 5.0
        SparSettings.set("allocation_room_count_weight", 3)
        SparSettings.set("allocation_room_count_weight", 4)
        assert SparSettings.get("allocation_room_count_weight") == 4.0

    def test_draft_versions(self):
        assert DraftDraw.next_version(self.spar) == 1
        DraftDraw.objects.create(spar=self.spar, version=1)
        assert DraftDraw.next_version(self.spar) == 2

    def build_room(self):
        members = [signup.member for signup in self.signups]
        return create_room(self.spar, members[0], {
            team: members[1 + 2 * i:3 + 2 * i]
            for i, team in enumerate(Role.teams())
        })

    def test_ballot_scores_by_team(self):
        room = self.build_room()
        ballot = submit_ballot(room, {OG: [75, 76], OO: [74, 74],
                                      CG: [70, 71], CO: [80, 79]})
        scores = ballot.scores_by_team()
        assert [score for _, score in scores[OG]] == [75, 76]
        assert [score for _, score in scores[CO]] == [80, 79]
        assert scores[OG][0][0] == self.signups[1].member_id
        ballot.clean()

    def test_tied_ballot_is_invalid(self):
        room = self.build_room()
        ballot = submit_ballot(room, {OG: [75, 75], OO: [74, 76],
                                      CG: [70, 71], CO: [80, 79]})
        with pytest.raises(ValidationError):
            ballot.clean()

    def test_canonical_ballot(self):
        room = self.build_room()
        submit_ballot(room, {OG: [75, 76], OO: [74, 74], CG: [70, 71], CO: [80, 79]})
        latest = submit_ballot(room, {OG: [75, 77], OO: [74, 74],
                                      CG: [70, 71], CO: [80, 79]})
        assert room.canonical_ballot() == latest
