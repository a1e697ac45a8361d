"""
LicenseRecord model.
"""
import uuid

from django.db import models
from django.utils import timezone


class LicenseRecord(models.Model):
    """
    A license key issued to a player with its current credential pair.

    The auto-increment primary key preserves insertion order; ``record_id``
    is the stable identity shared with the domain entity.
    """

    record_id = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    license_key = models.CharField(max_length=255, db_index=True)
    player_id = models.CharField(max_length=255, db_index=True)
    token = models.TextField()
    refresh_token = models.CharField(max_length=64, db_index=True)
    expiration_date = models.DateTimeField()
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "license_records"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["license_key", "player_id"], name="license_rec_key_player_idx"),
            models.Index(fields=["refresh_token", "player_id"], name="license_rec_refresh_player_idx"),
        ]

    def __str__(self):
        return f"{self.license_key} - {self.player_id}"
