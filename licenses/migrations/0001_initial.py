import uuid

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="LicenseRecord",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("record_id", models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ("license_key", models.CharField(db_index=True, max_length=255)),
                ("player_id", models.CharField(db_index=True, max_length=255)),
                ("token", models.TextField()),
                ("refresh_token", models.CharField(db_index=True, max_length=64)),
                ("expiration_date", models.DateTimeField()),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "license_records",
                "ordering": ["id"],
                "indexes": [
                    models.Index(
                        fields=["license_key", "player_id"], name="license_rec_key_player_idx"
                    ),
                    models.Index(
                        fields=["refresh_token", "player_id"], name="license_rec_refresh_player_idx"
                    ),
                ],
            },
        ),
    ]
