import logging

from django.db import models, transaction
from django.utils.module_loading import import_string

from sparring.libs.errors import emit_current_exception

logger = logging.getLogger(__name__)


class Task(models.Model):
    QUEUED = 0
    RUNNING = 1
    COMPLETED = 2
    FAILED = 3
    STATUS_CHOICES = (
        (QUEUED, "Queued"),
        (RUNNING, "Running"),
        (COMPLETED, "Completed"),
        (FAILED, "Failed"),
    )

    GENERATE_DRAFT = "generate_draft"
    KIND_CHOICES = (
        (GENERATE_DRAFT, "Generate draft draw"),
    )
    # kind -> dotted path of the function run with the task's argument
    HANDLERS = {
        GENERATE_DRAFT: "sparring.libs.draws.complete_draft",
    }

    kind = models.CharField(max_length=30, choices=KIND_CHOICES)
    argument = models.CharField(max_length=100)
    status = models.IntegerField(choices=STATUS_CHOICES, default=QUEUED)
    error_message = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"{self.kind}({self.argument}) => {self.get_status_display()}"

    @classmethod
    def enqueue(cls, kind, argument):
        if kind not in cls.HANDLERS:
            raise ValueError("Task kind {} not registered!".format(kind))
        with transaction.atomic():
            statuses = [cls.QUEUED, cls.RUNNING]
            if cls.objects.filter(kind=kind, argument=argument,
                                  status__in=statuses).exists():
                return None
            return cls.objects.create(kind=kind, argument=argument,
                                      status=cls.QUEUED)

    @classmethod
    def dequeue(cls):
        with transaction.atomic():
            to_dequeue = cls.objects.select_for_update().filter(
                status=cls.QUEUED).order_by("created_at", "id").first()
            if to_dequeue:
                to_dequeue.status = cls.RUNNING
                to_dequeue.save()
            return to_dequeue

    @classmethod
    def most_recent_run(cls, kind, argument):
        return cls.objects.filter(kind=kind, argument=argument).order_by(
            "created_at", "id").last()

    def is_terminated(self):
        return self.status in [Task.COMPLETED, Task.FAILED]

    def execute(self):
        try:
            if self.status != Task.RUNNING:
                self.status = Task.RUNNING
                self.save()
            handler = import_string(self.HANDLERS[self.kind])
            handler(self.argument)
        except Exception as e:
            logger.exception("Task %s failed", self)
            emit_current_exception()
            self.error_message = str(e)
            self.status = Task.FAILED
            self.save()
        else:
            self.status = Task.COMPLETED
            self.save()
        return self.status
