from django.contrib import admin

from sparring.apps.tasks.models import Task


class TaskAdmin(admin.ModelAdmin):
    list_display = ("kind", "argument", "status", "created_at")
    readonly_fields = ("error_message", )


admin.site.register(Task, TaskAdmin)
