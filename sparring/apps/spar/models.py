import uuid

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from sparring.libs import ballots
from sparring.libs.allocation.rooms import rooms_from_json
from sparring.libs.allocation.types import Role, Signup


def new_public_id():
    return str(uuid.uuid4())


class SparSettings(models.Model):
    key = models.CharField(max_length=50, unique=True)
    value = models.FloatField()

    class Meta:
        verbose_name_plural = "spar settings"

    def __str__(self):
        return f"{self.key} => {self.value}"

    @classmethod
    def get(cls, key, default=None):
        setting = cls.objects.filter(key=key).first()
        if setting is not None:
            return setting.value
        if default is None:
            raise ValueError(f"No SparSettings with key '{key}'")
        return default

    @classmethod
    def set(cls, key, value):
        cls.objects.update_or_create(key=key, defaults={"value": value})


class SparSeries(models.Model):
    public_id = models.CharField(max_length=36, unique=True, default=new_public_id)
    title = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = "spar series"

    def __str__(self):
        return self.title


class SparSeriesMember(models.Model):
    series = models.ForeignKey(SparSeries, on_delete=models.CASCADE,
                               related_name="members")
    name = models.CharField(max_length=100)
    email = models.EmailField(blank=True, default="")

    class Meta:
        unique_together = ("series", "name")
        ordering = ["name"]

    def __str__(self):
        return self.name


class Spar(models.Model):
    public_id = models.CharField(max_length=36, unique=True, default=new_public_id)
    series = models.ForeignKey(SparSeries, on_delete=models.CASCADE,
                               related_name="spars")
    start_time = models.DateTimeField()
    # signups are only accepted while the spar is open
    is_open = models.BooleanField(default=True)
    # once the draw is released it can no longer be replaced
    release_draw = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.series} @ {self.start_time}"

    def allocation_signups(self):
        """member id -> Signup for everyone signed up to this spar"""
        return {
            signup.member_id: signup.to_signup()
            for signup in self.signups.all()
        }


class SparSignup(models.Model):
    public_id = models.CharField(max_length=36, unique=True, default=new_public_id)
    spar = models.ForeignKey(Spar, on_delete=models.CASCADE, related_name="signups")
    member = models.ForeignKey(SparSeriesMember, on_delete=models.CASCADE,
                               related_name="signups")
    as_judge = models.BooleanField(default=False)
    as_speaker = models.BooleanField(default=False)
    partner_preference = models.ForeignKey(SparSeriesMember,
                                           blank=True,
                                           null=True,
                                           on_delete=models.SET_NULL,
                                           related_name="partner_requests")

    class Meta:
        unique_together = ("spar", "member")

    def __str__(self):
        return f"{self.member} for {self.spar}"

    def clean(self):
        if not self.spar.is_open or self.spar.release_draw:
            raise ValidationError("Signups for this spar are closed")
        if not (self.as_judge or self.as_speaker):
            raise ValidationError("Sign up to judge, to speak, or both")
        if self.partner_preference_id is not None:
            if self.partner_preference_id == self.member_id:
                raise ValidationError("You can't ask to be partnered with yourself")
            if not self.as_speaker:
                raise ValidationError("Only speakers can ask for a partner")

    def to_signup(self):
        return Signup(self.member_id, self.as_judge, self.as_speaker,
                      self.partner_preference_id)


class SparRoom(models.Model):
    public_id = models.CharField(max_length=36, unique=True, default=new_public_id)
    spar = models.ForeignKey(Spar, on_delete=models.CASCADE, related_name="rooms")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"Room {self.public_id}"

    def canonical_ballot(self):
        """Conflicting ballots are resolved by trusting the most recent one"""
        return self.ballots.order_by("-created_at", "-id").first()


class SparAdjudicator(models.Model):
    CHAIR = "chair"
    PANELLIST = "panellist"
    STATUS_CHOICES = (
        (CHAIR, "Chair"),
        (PANELLIST, "Panellist"),
    )

    public_id = models.CharField(max_length=36, unique=True, default=new_public_id)
    room = models.ForeignKey(SparRoom, on_delete=models.CASCADE,
                             related_name="adjudicators")
    member = models.ForeignKey(SparSeriesMember, on_delete=models.CASCADE)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES,
                              default=PANELLIST)

    class Meta:
        unique_together = ("room", "member")

    def __str__(self):
        return f"{self.member} ({self.status})"


class SparTeam(models.Model):
    OG = 0
    OO = 1
    CG = 2
    CO = 3
    POSITION_CHOICES = (
        (OG, "Opening Government"),
        (OO, "Opening Opposition"),
        (CG, "Closing Government"),
        (CO, "Closing Opposition"),
    )

    public_id = models.CharField(max_length=36, unique=True, default=new_public_id)
    room = models.ForeignKey(SparRoom, on_delete=models.CASCADE, related_name="teams")
    position = models.IntegerField(choices=POSITION_CHOICES)

    class Meta:
        unique_together = ("room", "position")
        ordering = ["position"]

    def __str__(self):
        return self.get_position_display()

    @property
    def role(self):
        return Role.from_position(self.position)


class SparSpeaker(models.Model):
    public_id = models.CharField(max_length=36, unique=True, default=new_public_id)
    team = models.ForeignKey(SparTeam, on_delete=models.CASCADE, related_name="speakers")
    member = models.ForeignKey(SparSeriesMember, on_delete=models.CASCADE)

    class Meta:
        unique_together = ("team", "member")

    def __str__(self):
        return str(self.member)


class AdjudicatorBallot(models.Model):
    public_id = models.CharField(max_length=36, unique=True, default=new_public_id)
    room = models.ForeignKey(SparRoom, on_delete=models.CASCADE, related_name="ballots")
    adjudicator = models.ForeignKey(SparAdjudicator, on_delete=models.CASCADE,
                                    related_name="ballots")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"Ballot for {self.room} by {self.adjudicator}"

    def scores_by_team(self):
        """Role -> list of (member id, score), in speaking order of the team"""
        result = {team: [] for team in Role.teams()}
        scores = self.scores.select_related("speaker__team").order_by("speaker__team__position", "id")
        for score in scores:
            result[score.speaker.team.role].append((score.speaker.member_id, score.score))
        return result

    def clean(self):
        if self.pk is None:
            return
        ballots.validate_ballot({
            team: [score for _, score in scores]
            for team, scores in self.scores_by_team().items()
        })


class BallotScore(models.Model):
    ballot = models.ForeignKey(AdjudicatorBallot, on_delete=models.CASCADE,
                               related_name="scores")
    speaker = models.ForeignKey(SparSpeaker, on_delete=models.CASCADE)
    score = models.IntegerField(validators=[MinValueValidator(ballots.MIN_SPEAK),
                                            MaxValueValidator(ballots.MAX_SPEAK)])

    class Meta:
        unique_together = ("ballot", "speaker")

    def __str__(self):
        return f"{self.speaker}: {self.score}"


class DraftDraw(models.Model):
    public_id = models.CharField(max_length=36, unique=True, default=new_public_id)
    spar = models.ForeignKey(Spar, on_delete=models.CASCADE, related_name="draft_draws")
    # the rooms as JSON; null while the draw is still being generated
    data = models.TextField(null=True, blank=True)
    version = models.IntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ("spar", "version")
        ordering = ["-created_at", "-version"]

    def __str__(self):
        return f"Draft {self.version} for {self.spar}"

    @property
    def is_ready(self):
        return self.data is not None

    def rooms(self):
        if self.data is None:
            return None
        return rooms_from_json(self.data)

    @classmethod
    def next_version(cls, spar):
        latest = cls.objects.filter(spar=spar).order_by("-version").first()
        return latest.version + 1 if latest else 1
