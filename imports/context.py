"""Typed import context - Parameter Object for the CSV importer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.conf import settings

from imports.types import LogFn, VerbosityLevel


def _discard(
    message: str,
    verbosity: VerbosityLevel,
    min_level: VerbosityLevel,
    style: str | None = None,
) -> None:
    """Drop every message; used when the pipeline runs outside a management command."""
    del message, verbosity, min_level, style


@dataclass(frozen=True)
class ImportContext:
    """
    Immutable, typed context shared across one import call.

    Provides a convenience :meth:`log` that eliminates the need to pass *verbosity* on every call.
    Holds no mutable state: the per-call name indices live in
    :class:`~imports.resolver.ResolutionScope` and are threaded through the row loop explicitly.
    """

    verbosity: VerbosityLevel = VerbosityLevel.MINIMAL
    log_fn: LogFn = _discard
    max_displayed_errors: int = 5
    default_group_color: str = "#3b82f6"

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------

    def log(
        self,
        message: str,
        min_level: VerbosityLevel,
        style: str | None = None,
    ) -> None:
        """
        Emit *message* when ``self.verbosity >= min_level``.

        Delegates to the :attr:`log_fn` callback supplied at construction.
        """
        self.log_fn(message, self.verbosity, min_level, style)

    @classmethod
    def from_settings(cls) -> ImportContext:
        """Construct a silent context configured from Django settings."""
        return cls(
            max_displayed_errors=settings.CSV_IMPORT_MAX_DISPLAYED_ERRORS,
            default_group_color=settings.CSV_IMPORT_DEFAULT_GROUP_COLOR,
        )

    @classmethod
    def from_options(cls, options: dict[str, Any], *, log_fn: LogFn) -> ImportContext:
        """Construct from Django's parsed ``options`` dict (as passed to ``handle()``)."""
        max_errors = options.get("max_errors")
        if max_errors is None:
            max_errors = settings.CSV_IMPORT_MAX_DISPLAYED_ERRORS
        return cls(
            verbosity=VerbosityLevel(min(options["verbosity"], VerbosityLevel.DEBUG.value)),
            log_fn=log_fn,
            max_displayed_errors=max_errors,
            default_group_color=settings.CSV_IMPORT_DEFAULT_GROUP_COLOR,
        )
