from django.apps import AppConfig


class TasksConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "sparring.apps.tasks"
    verbose_name = "Background tasks"
