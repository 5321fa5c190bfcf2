from django.core.management.base import BaseCommand, CommandError

from sparring.apps.spar.models import Spar
from sparring.libs import draws
from sparring.libs.errors import CapacityError


class Command(BaseCommand):
    help = "Create a draft draw for a spar"

    def add_arguments(self, parser):
        parser.add_argument("spar_id", help="public id of the spar")
        parser.add_argument("--sync", action="store_true",
                            help="generate the draw now instead of queueing it")

    def handle(self, *args, **options):
        try:
            spar = Spar.objects.get(public_id=options["spar_id"])
        except Spar.DoesNotExist:
            raise CommandError(f"No spar with id {options['spar_id']}")

        try:
            draft = draws.request_draft(spar, queue=not options["sync"])
            if options["sync"]:
                draft = draws.complete_draft(draft.public_id)
        except CapacityError as e:
            raise CommandError(e.msg)

        if options["sync"]:
            self.stdout.write(f"Draft {draft.public_id} is ready:")
            for index, room in sorted(draft.rooms().items()):
                self.stdout.write(f"  {index}: {room}")
        else:
            self.stdout.write(f"Queued draft {draft.public_id} (version {draft.version})")
