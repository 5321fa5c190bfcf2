import django.core.validators
import django.db.models.deletion
from django.db import migrations, models

import sparring.apps.spar.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SparSettings",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(max_length=50, unique=True)),
                ("value", models.FloatField()),
            ],
            options={
                "verbose_name_plural": "spar settings",
            },
        ),
        migrations.CreateModel(
            name="SparSeries",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("public_id", models.CharField(default=sparring.apps.spar.models.new_public_id, max_length=36, unique=True)),
                ("title", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name_plural": "spar series",
            },
        ),
        migrations.CreateModel(
            name="SparSeriesMember",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("email", models.EmailField(blank=True, default="", max_length=254)),
                ("series", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="members", to="spar.sparseries")),
            ],
            options={
                "ordering": ["name"],
                "unique_together": {("series", "name")},
            },
        ),
        migrations.CreateModel(
            name="Spar",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("public_id", models.CharField(default=sparring.apps.spar.models.new_public_id, max_length=36, unique=True)),
                ("start_time", models.DateTimeField()),
                ("is_open", models.BooleanField(default=True)),
                ("release_draw", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("series", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="spars", to="spar.sparseries")),
            ],
        ),
        migrations.CreateModel(
            name="SparSignup",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("public_id", models.CharField(default=sparring.apps.spar.models.new_public_id, max_length=36, unique=True)),
                ("as_judge", models.BooleanField(default=False)),
                ("as_speaker", models.BooleanField(default=False)),
                ("member", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="signups", to="spar.sparseriesmember")),
                ("partner_preference", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="partner_requests", to="spar.sparseriesmember")),
                ("spar", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="signups", to="spar.spar")),
            ],
            options={
                "unique_together": {("spar", "member")},
            },
        ),
        migrations.CreateModel(
            name="SparRoom",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("public_id", models.CharField(default=sparring.apps.spar.models.new_public_id, max_length=36, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("spar", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="rooms", to="spar.spar")),
            ],
            options={
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="SparAdjudicator",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("public_id", models.CharField(default=sparring.apps.spar.models.new_public_id, max_length=36, unique=True)),
                ("status", models.CharField(choices=[("chair", "Chair"), ("panellist", "Panellist")], default="panellist", max_length=10)),
                ("member", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="spar.sparseriesmember")),
                ("room", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="adjudicators", to="spar.sparroom")),
            ],
            options={
                "unique_together": {("room", "member")},
            },
        ),
        migrations.CreateModel(
            name="SparTeam",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("public_id", models.CharField(default=sparring.apps.spar.models.new_public_id, max_length=36, unique=True)),
                ("position", models.IntegerField(choices=[(0, "Opening Government"), (1, "Opening Opposition"), (2, "Closing Government"), (3, "Closing Opposition")])),
                ("room", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="teams", to="spar.sparroom")),
            ],
            options={
                "ordering": ["position"],
                "unique_together": {("room", "position")},
            },
        ),
        migrations.CreateModel(
            name="SparSpeaker",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("public_id", models.CharField(default=sparring.apps.spar.models.new_public_id, max_length=36, unique=True)),
                ("member", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="spar.sparseriesmember")),
                ("team", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="speakers", to="spar.sparteam")),
            ],
            options={
                "unique_together": {("team", "member")},
            },
        ),
        migrations.CreateModel(
            name="AdjudicatorBallot",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("public_id", models.CharField(default=sparring.apps.spar.models.new_public_id, max_length=36, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("adjudicator", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="ballots", to="spar.sparadjudicator")),
                ("room", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="ballots", to="spar.sparroom")),
            ],
            options={
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="BallotScore",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("score", models.IntegerField(validators=[django.core.validators.MinValueValidator(50), django.core.validators.MaxValueValidator(100)])),
                ("ballot", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="scores", to="spar.adjudicatorballot")),
                ("speaker", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="spar.sparspeaker")),
            ],
            options={
                "unique_together": {("ballot", "speaker")},
            },
        ),
        migrations.CreateModel(
            name="DraftDraw",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("public_id", models.CharField(default=sparring.apps.spar.models.new_public_id, max_length=36, unique=True)),
                ("data", models.TextField(blank=True, null=True)),
                ("version", models.IntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("spar", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="draft_draws", to="spar.spar")),
            ],
            options={
                "ordering": ["-created_at", "-version"],
                "unique_together": {("spar", "version")},
            },
        ),
    ]
