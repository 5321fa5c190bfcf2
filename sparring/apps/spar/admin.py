from django.contrib import admin

from sparring.apps.spar import models


class SparSignupInline(admin.TabularInline):
    model = models.SparSignup
    fk_name = "spar"
    extra = 0


class SparAdmin(admin.ModelAdmin):
    list_display = ("series", "start_time", "is_open", "release_draw")
    inlines = (SparSignupInline, )


class BallotScoreInline(admin.TabularInline):
    model = models.BallotScore
    extra = 0


class AdjudicatorBallotAdmin(admin.ModelAdmin):
    list_display = ("room", "adjudicator", "created_at")
    inlines = (BallotScoreInline, )


class DraftDrawAdmin(admin.ModelAdmin):
    list_display = ("spar", "version", "is_ready", "created_at")
    readonly_fields = ("data", )


admin.site.register(models.SparSettings)
admin.site.register(models.SparSeries)
admin.site.register(models.SparSeriesMember)
admin.site.register(models.Spar, SparAdmin)
admin.site.register(models.SparRoom)
admin.site.register(models.SparAdjudicator)
admin.site.register(models.SparTeam)
admin.site.register(models.SparSpeaker)
admin.site.register(models.AdjudicatorBallot, AdjudicatorBallotAdmin)
admin.site.register(models.DraftDraw, DraftDrawAdmin)
