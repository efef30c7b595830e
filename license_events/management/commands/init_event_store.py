"""
Django management command to create the license event table.

Safe to run repeatedly; an existing table and its rows are left untouched.
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from core.domain.exceptions import StorageUnavailableError
from license_events.infrastructure.repositories.django_event_repository import (
    open_event_store,
)

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to initialize the event store."""

    help = "Create the license event table if it does not exist"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--database",
            default=None,
            help="Database alias (defaults to LICENSE_EVENTS['DATABASE'])",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        try:
            repository = open_event_store(using=options["database"])
        except StorageUnavailableError as e:
            logger.error("Event store initialization failed: %s", e.message)
            raise CommandError(e.message) from e

        self.stdout.write(
            # pylint: disable=no-member
            self.style.SUCCESS(f"Event store ready on database '{repository.using}'")
        )
