"""
Models module of the license_events app.

Django discovers an app's models through `<app>.models`; the model itself
lives in the infrastructure layer.
"""
from license_events.infrastructure.models import Event

__all__ = ("Event",)
