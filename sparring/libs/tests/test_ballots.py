from django.core.exceptions import ValidationError
import pytest

from sparring.libs.allocation.types import Role
from sparring.libs.ballots import bp_ranking, ranks_of, team_totals, validate_ballot
from sparring.libs.errors import TiedBallotError

OG, OO, CG, CO = Role.teams()


class TestBallots(object):

    def test_team_totals(self):
        totals = team_totals({OG: [75, 76], OO: [70], CG: [], CO: [80, 80]})
        assert totals == {OG: 151, OO: 70, CG: 0, CO: 160}

    def test_ranking(self):
        totals = {OG: 150, OO: 155, CG: 149, CO: 160}
        assert bp_ranking(totals) == [CO, OO, OG, CG]
        assert ranks_of(totals) == {CO: 1, OO: 2, OG: 3, CG: 4}

    def test_tie(self):
        with pytest.raises(TiedBallotError) as e:
            bp_ranking({OG: 150, OO: 155, CG: 150, CO: 160})
        assert e.value.roles == (OG, CG)
        assert str(e.value) == ("Opening Government and Closing Government "
                                "have the same sum of speaks")

    def test_missing_team(self):
        with pytest.raises(ValueError):
            bp_ranking({OG: 150, OO: 155, CG: 149})

    def test_validate_ballot(self):
        validate_ballot({OG: [75, 76], OO: [74, 74], CG: [70, 71], CO: [80, 79]})

    def test_validate_ballot_out_of_range(self):
        with pytest.raises(ValidationError):
            validate_ballot({OG: [75, 101], OO: [74, 74], CG: [70, 71],
                             CO: [80, 79]})
        with pytest.raises(ValidationError):
            validate_ballot({OG: [49, 76], OO: [74, 74], CG: [70, 71],
                             CO: [80, 79]})

    def test_validate_ballot_tie(self):
        with pytest.raises(ValidationError):
            validate_ballot({OG: [75, 75], OO: [74, 76], CG: [70, 71],
                             CO: [80, 79]})
