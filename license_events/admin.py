"""
Django admin configuration for license_events app.
"""

from django.contrib import admin

from license_events.domain.status_types import StatusVocabulary
from license_events.infrastructure.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    """Read-only admin interface for the append-only event log."""

    list_display = [
        "id",
        "license_status_fk",
        "type_display",
        "device_id",
        "device_name",
        "timestamp",
    ]
    list_filter = [
        "type",
        "timestamp",
    ]
    search_fields = [
        "device_id",
        "device_name",
        "=license_status_fk",
    ]
    ordering = ["-timestamp"]
    date_hierarchy = "timestamp"

    def type_display(self, obj):
        """Display the status name of the type code."""
        return StatusVocabulary.from_settings().name_for(obj.type) or obj.type

    type_display.short_description = "Type"
    type_display.admin_order_field = "type"

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
