"""
License events module - Append-only log of license status events.

This module handles:
- Event entity and its device projections
- Status vocabulary (type code <-> name)
- Device registration status and registered-device listing
"""
