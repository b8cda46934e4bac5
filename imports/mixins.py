"""
Command mixins that compose with :class:`~django.core.management.base.BaseCommand`.

* :class:`LoggingMixin` -- verbosity-aware, styled output.
* :class:`ReportMixin` -- prints an :class:`~imports.types.ImportResult` summary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from imports.types import VerbosityLevel


if TYPE_CHECKING:
    from django.core.management.base import OutputWrapper
    from django.core.management.color import Style

    from imports.context import ImportContext
    from imports.types import EntityKind, ImportResult


class LoggingMixin:
    """
    Verbosity-aware logging for ``BaseCommand`` subclasses.

    Relies on ``stdout``, ``stderr``, and ``style`` attributes provided by
    :class:`~django.core.management.base.BaseCommand`.
    """

    stdout: OutputWrapper
    stderr: OutputWrapper
    style: Style

    def _log(
        self,
        message: str,
        verbosity: VerbosityLevel,
        min_level: VerbosityLevel,
        style: str | None = None,
    ) -> None:
        """
        Write *message* to stdout/stderr when *verbosity* >= *min_level*.

        ``style`` is an optional Django style name (``"SUCCESS"``, ``"WARNING"``, ``"ERROR"``);
        ``"ERROR"`` directs output to *stderr*.
        """
        if verbosity.value < min_level.value:
            return
        if style == "SUCCESS":
            self.stdout.write(self.style.SUCCESS(message))
        elif style == "WARNING":
            self.stdout.write(self.style.WARNING(message))
        elif style == "ERROR":
            self.stderr.write(self.style.ERROR(message))
        else:
            self.stdout.write(message)


class ReportMixin(LoggingMixin):
    """Summarize an import: created count first, then a capped list of errors."""

    def _report(self, kind: EntityKind, result: ImportResult, ctx: ImportContext) -> None:
        style = "SUCCESS" if result.created else "WARNING"
        ctx.log(f"Imported {result.created} {kind}", VerbosityLevel.MINIMAL, style)

        if not result.errors:
            return
        ctx.log(
            f"{len(result.errors)} row(s) reported problems:",
            VerbosityLevel.NORMAL,
            "WARNING",
        )
        for message in result.capped_errors(ctx.max_displayed_errors):
            ctx.log(message, VerbosityLevel.NORMAL, "ERROR")
