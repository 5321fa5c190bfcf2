from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Task",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("kind", models.CharField(choices=[("generate_draft", "Generate draft draw")], max_length=30)),
                ("argument", models.CharField(max_length=100)),
                ("status", models.IntegerField(choices=[(0, "Queued"), (1, "Running"), (2, "Completed"), (3, "Failed")], default=0)),
                ("error_message", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["created_at", "id"],
            },
        ),
    ]
