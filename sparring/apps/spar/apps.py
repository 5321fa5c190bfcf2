from django.apps import AppConfig


class SparConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "sparring.apps.spar"
    verbose_name = "Spars"
