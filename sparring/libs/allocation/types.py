from collections import namedtuple
from enum import Enum


class Role(Enum):
    OG = "og"
    OO = "oo"
    CG = "cg"
    CO = "co"
    JUDGE = "judge"

    @classmethod
    def teams(cls):
        """The four team slots, in speaking order"""
        return (cls.OG, cls.OO, cls.CG, cls.CO)

    @classmethod
    def from_position(cls, position):
        return cls.teams()[position]

    @property
    def is_team(self):
        return self is not Role.JUDGE

    @property
    def position(self):
        if not self.is_team:
            raise ValueError("Judges do not have a speaking position")
        return Role.teams().index(self)

    @property
    def label(self):
        return ROLE_LABELS[self]


ROLE_LABELS = {
    Role.OG: "Opening Government",
    Role.OO: "Opening Opposition",
    Role.CG: "Closing Government",
    Role.CO: "Closing Opposition",
    Role.JUDGE: "Judge",
}


class Signup(namedtuple("Signup", ["participant_id", "as_judge", "as_speaker",
                                   "partner_preference"])):
    __slots__ = ()

    def __new__(cls, participant_id, as_judge, as_speaker,
                partner_preference=None):
        return super(Signup, cls).__new__(cls, participant_id, as_judge,
                                          as_speaker, partner_preference)


class Assignment(namedtuple("Assignment", ["room", "role"])):
    __slots__ = ()

    @classmethod
    def judge(cls, room):
        return cls(room, Role.JUDGE)

    @classmethod
    def team(cls, room, team):
        if not team.is_team:
            raise ValueError("{} is not a team slot".format(team))
        return cls(room, team)

    @property
    def is_judge(self):
        return self.role is Role.JUDGE


class Room(object):
    """
    A room of a draw: the judging panel plus the members of each team slot.
    """

    def __init__(self, panel=None, teams=None):
        self.panel = set(panel or ())
        self.teams = {}
        for team, members in (teams or {}).items():
            self.teams[team] = set(members)

    def participants(self):
        result = set(self.panel)
        for members in self.teams.values():
            result |= members
        return result

    def __eq__(self, other):
        if not isinstance(other, Room):
            return NotImplemented
        return self.panel == other.panel and self.teams == other.teams

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        teams = ", ".join("{}={}".format(team.value, sorted(self.teams[team], key=str))
                          for team in Role.teams() if team in self.teams)
        return "Room(panel={}, {})".format(sorted(self.panel, key=str), teams)
