"""
Event Django ORM model.

This is the infrastructure layer model for license status events.
Domain entities are in license_events.domain.event.
"""
from django.db import models


class Event(models.Model):
    """
    A single row of the append-only license event log.

    `type` holds the integer type code; its name comes from the
    status vocabulary.
    """

    id = models.AutoField(primary_key=True)
    device_name = models.CharField(max_length=255, null=True, blank=True, default=None)
    timestamp = models.DateTimeField()
    type = models.IntegerField()
    device_id = models.CharField(max_length=255, null=True, blank=True, default=None)
    license_status_fk = models.IntegerField(help_text="License status record ID")

    class Meta:
        db_table = "event"

    def __str__(self):
        return f"event {self.id} ({self.type}) for license status {self.license_status_fk}"
