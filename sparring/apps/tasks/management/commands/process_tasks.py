import time

from django.core.management.base import BaseCommand

from sparring.apps.tasks.models import Task


class Command(BaseCommand):
    help = "Process any queued tasks"

    def add_arguments(self, parser):
        parser.add_argument("--once", action="store_true",
                            help="exit once the queue is empty")
        parser.add_argument("--sleep", type=float, default=1.0,
                            help="seconds to wait between polls of an empty queue")

    def handle(self, *args, **options):
        while True:
            cur_task = Task.dequeue()
            if cur_task:
                self.stdout.write(f"Running {cur_task}")
                cur_task.execute()
                self.stdout.write(f"Finished {cur_task}")
            elif options["once"]:
                return
            else:
                time.sleep(options["sleep"])
