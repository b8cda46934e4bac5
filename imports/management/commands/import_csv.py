"""Management command for bulk-importing event data from a CSV file."""

import argparse
from pathlib import Path
from typing import Any

import structlog
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError, CommandParser

from events.models import Event
from imports.context import ImportContext
from imports.mixins import ReportMixin
from imports.pipeline import bulk_import
from imports.types import EntityKind, VerbosityLevel


logger = structlog.get_logger(__name__)


def non_negative_int(value: str) -> int:
    """Parse a count given on the command line; negative numbers are rejected."""
    number = int(value)
    if number < 0:
        msg = f"must be zero or a positive number, got {number}"
        raise argparse.ArgumentTypeError(msg)
    return number


class Command(ReportMixin, BaseCommand):
    """Import speakers, sessions, exhibitors, sponsors, groups or attendees of one event."""

    help = "Import one entity kind of an event from a CSV file (console or Whova export format)"

    def add_arguments(self, parser: CommandParser) -> None:
        """Add command line arguments."""
        parser.add_argument(
            "kind",
            choices=[kind.value for kind in EntityKind],
            help="Entity kind the rows describe",
        )
        parser.add_argument(
            "csv_path",
            type=Path,
            help="Path to the UTF-8 CSV file",
        )
        parser.add_argument(
            "--event",
            required=True,
            help="Slug of the event the rows belong to",
        )
        parser.add_argument(
            "--max-errors",
            type=non_negative_int,
            default=settings.CSV_IMPORT_MAX_DISPLAYED_ERRORS,
            help="Number of error messages to print before summarizing the rest (0 prints none)",
        )

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: ARG002
        """Read the file, run the import and print the outcome."""
        ctx = ImportContext.from_options(options, log_fn=self._log)
        kind = EntityKind(options["kind"])
        event = self._get_event(options["event"])
        text = self._read_csv(options["csv_path"])

        ctx.log(
            f"Reading {kind} for event '{event.slug}' from {options['csv_path']}",
            VerbosityLevel.DETAILED,
        )
        result = bulk_import(kind, event, text, ctx)
        logger.info(
            "csv_command_finished",
            kind=str(kind),
            event_slug=event.slug,
            created=result.created,
            errors=len(result.errors),
        )
        self._report(kind, result, ctx)

    def _get_event(self, slug: str) -> Event:
        try:
            return Event.objects.get(slug=slug)
        except Event.DoesNotExist as exc:
            msg = f"Event '{slug}' does not exist"
            raise CommandError(msg) from exc

    def _read_csv(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Could not read CSV file {path}: {exc}"
            raise CommandError(msg) from exc
