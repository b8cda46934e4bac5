"""Shared enums, aliases and the import result container for the CSV import pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, StrEnum
from typing import Protocol


#: A tokenized CSV data line keyed by normalized header; empty string means "absent".
type RawRow = dict[str, str]

#: Message returned when a file holds no data rows at all.
NO_ROWS_MESSAGE = "No valid rows found in CSV"


class EntityKind(StrEnum):
    """Entity kinds that can be bulk-imported from CSV."""

    SPEAKERS = "speakers"
    SESSIONS = "sessions"
    EXHIBITORS = "exhibitors"
    SPONSORS = "sponsors"
    GROUPS = "groups"
    ATTENDEES = "attendees"


class VerbosityLevel(Enum):
    """Django management-command verbosity levels (mirrors the built-in ``--verbosity`` flag)."""

    MINIMAL = 0
    NORMAL = 1
    DETAILED = 2
    DEBUG = 3


class LogFn(Protocol):
    """
    Callback signature accepted by :meth:`ImportContext.log`.

    Matches :meth:`LoggingMixin._log`.
    """

    def __call__(
        self,
        message: str,
        verbosity: VerbosityLevel,
        min_level: VerbosityLevel,
        style: str | None = None,
    ) -> None: ...


@dataclass
class ImportResult:
    """
    Outcome of one bulk import call.

    ``errors`` is append-only and ordered like the rows of the file. ``created`` counts main
    entities that were persisted; it does not have to add up with ``len(errors)`` to the number of
    rows because a created row may still report failed references.
    """

    created: int = 0
    errors: list[str] = field(default_factory=list)

    @classmethod
    def structural_failure(cls, message: str = NO_ROWS_MESSAGE) -> ImportResult:
        """Return the result for a file that could not be imported at all."""
        return cls(created=0, errors=[message])

    def add_error(self, message: str) -> None:
        """Append a human-readable error sentence."""
        self.errors.append(message)

    def record_created(self) -> None:
        """Count one successfully persisted main entity."""
        self.created += 1

    def capped_errors(self, limit: int) -> list[str]:
        """
        Return at most *limit* errors, followed by a summary line for the rest.

        >>> ImportResult(errors=["a", "b", "c"]).capped_errors(2)
        ['a', 'b', '...and 1 more errors']
        """
        limit = max(limit, 0)
        if len(self.errors) <= limit:
            return list(self.errors)
        hidden = len(self.errors) - limit
        return [*self.errors[:limit], f"...and {hidden} more errors"]

    def as_dict(self) -> dict[str, int | list[str]]:
        """Return the ``{created, errors}`` mapping handed to callers."""
        return {"created": self.created, "errors": list(self.errors)}
