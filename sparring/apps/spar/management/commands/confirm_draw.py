from django.core.management.base import BaseCommand, CommandError

from sparring.apps.spar.models import DraftDraw
from sparring.libs import draws
from sparring.libs.errors import (
    DrawGenerationFailedError,
    DrawNotReadyError,
    DrawReleasedError,
)


class Command(BaseCommand):
    help = "Replace the rooms of a spar with those of a draft draw"

    def add_arguments(self, parser):
        parser.add_argument("draft_id", help="public id of the draft draw")

    def handle(self, *args, **options):
        try:
            draft = DraftDraw.objects.select_related("spar").get(
                public_id=options["draft_id"])
        except DraftDraw.DoesNotExist:
            raise CommandError(f"No draft draw with id {options['draft_id']}")

        try:
            rooms = draws.confirm_draft(draft)
        except (DrawGenerationFailedError, DrawNotReadyError,
                DrawReleasedError) as e:
            raise CommandError(e.msg)
        self.stdout.write(f"Confirmed {len(rooms)} rooms for {draft.spar}")
