"""Management command that writes an example import CSV."""

from pathlib import Path
from typing import Any

from django.core.management.base import BaseCommand, CommandError, CommandParser

from imports.csv_templates import generate_template
from imports.types import EntityKind


class Command(BaseCommand):
    """Print or save the example CSV of one entity kind."""

    help = "Write an example CSV for the given entity kind"

    def add_arguments(self, parser: CommandParser) -> None:
        """Add command line arguments."""
        parser.add_argument(
            "kind",
            choices=[kind.value for kind in EntityKind],
            help="Entity kind of the template",
        )
        parser.add_argument(
            "--output",
            type=Path,
            help="Write the template to this file instead of stdout",
        )

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: ARG002
        """Render the template and write it out."""
        template = generate_template(options["kind"])
        output: Path | None = options.get("output")

        if output is None:
            self.stdout.write(template)
            return

        try:
            output.write_text(template + "\n", encoding="utf-8")
        except OSError as exc:
            msg = f"Could not write template to {output}: {exc}"
            raise CommandError(msg) from exc
        self.stdout.write(self.style.SUCCESS(f"Wrote {options['kind']} template to {output}"))
