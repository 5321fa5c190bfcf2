import pytest

from sparring.libs.draws import check_capacity
from sparring.libs.errors import NotEnoughJudgesError, NotEnoughSpeakersError
from sparring.libs.tests.helpers import generate_participants


class TestCapacity(object):

    @pytest.mark.parametrize("judges, speakers, both", [
        (1, 4, 0),
        (1, 8, 0),
        (0, 8, 1),
        (0, 7, 1),
        (3, 24, 0),
        (0, 12, 6),
        (1, 15, 8),
        (0, 0, 5),
    ])
    def test_enough_people(self, judges, speakers, both):
        check_capacity(generate_participants(judges, speakers, both))

    @pytest.mark.parametrize("judges, speakers, both", [
        (5, 3, 0),
        (0, 0, 3),
        (0, 0, 0),
    ])
    def test_not_enough_speakers(self, judges, speakers, both):
        with pytest.raises(NotEnoughSpeakersError):
            check_capacity(generate_participants(judges, speakers, both))

    @pytest.mark.parametrize("judges, speakers, both", [
        (0, 8, 0),
        (1, 9, 0),
        (2, 17, 0),
        (0, 4, 0),
    ])
    def test_not_enough_judges(self, judges, speakers, both):
        with pytest.raises(NotEnoughJudgesError):
            check_capacity(generate_participants(judges, speakers, both))

    @pytest.mark.parametrize("judges, speakers, both", [
        # everyone would have to speak to fill a room, leaving no judge
        (0, 0, 4),
        # the only judge is also needed as the fourth speaker
        (0, 3, 1),
    ])
    def test_no_valid_split(self, judges, speakers, both):
        with pytest.raises(NotEnoughJudgesError) as e:
            check_capacity(generate_participants(judges, speakers, both))
        assert "Can't split" in e.value.msg
