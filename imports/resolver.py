"""
Name-reference resolution for the CSV importer.

Sessions reference speakers by name, attendees reference groups by name. Both are resolved against
a :class:`ResolutionScope`: the index of entities that existed when the import started plus the
index of entities created during the current call. Neither index outlives one
:func:`~imports.pipeline.bulk_import` call.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

import structlog

from imports.errors import BackendError, ReferenceResolutionError


logger = structlog.get_logger(__name__)

#: Creates an entity from a display name and returns its primary key.
type CreateByName = Callable[[str], int]


def normalize_name(name: str) -> str:
    """Return the lookup key of *name* (trimmed, lowercased)."""
    return name.strip().lower()


class NameIndex:
    """Mapping from a normalized entity name to its primary key."""

    def __init__(self, entries: Iterable[tuple[str, int]] = ()) -> None:
        self._ids: dict[str, int] = {}
        for name, pk in entries:
            self.add(name, pk)

    def get(self, name: str) -> int | None:
        """Return the id stored for *name*, or ``None``."""
        return self._ids.get(normalize_name(name))

    def add(self, name: str, pk: int) -> None:
        """Store *pk* for *name*; the first id seen for a name wins."""
        key = normalize_name(name)
        if key:
            self._ids.setdefault(key, pk)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)


@dataclass
class ResolutionScope:
    """
    Call-scoped pair of indices used while resolving references.

    ``existing`` is seeded once from persisted entities; ``created`` collects entities created
    during the current call. :meth:`remember` writes through to both.
    """

    existing: NameIndex = field(default_factory=NameIndex)
    created: NameIndex = field(default_factory=NameIndex)

    def lookup(self, name: str) -> int | None:
        """Check the seeded index first, then the entities created in this call."""
        pk = self.existing.get(name)
        if pk is None:
            pk = self.created.get(name)
        return pk

    def remember(self, name: str, pk: int) -> None:
        """Record a newly created entity."""
        self.created.add(name, pk)
        self.existing.add(name, pk)


@dataclass
class Resolution:
    """Resolved ids in input order plus one error per dropped reference."""

    ids: list[int] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


class EntityResolver:
    """
    Resolve lists of human-readable names into ids.

    When *create* is given the referenced kind is auto-creatable: an unknown name is created once
    and remembered in the scope, so a later row of the same file reuses it. Otherwise an unknown
    name yields a *not_found* error and is dropped.

    Message templates receive ``{label}`` (the referencing row), ``{name}`` and, for creation
    failures, ``{error}``.
    """

    def __init__(
        self,
        scope: ResolutionScope,
        *,
        create: CreateByName | None = None,
        not_found_message: str = 'Not found for "{label}": "{name}"',
        create_failed_message: str = 'Failed to create "{name}": {error}',
    ) -> None:
        self.scope = scope
        self.create = create
        self.not_found_message = not_found_message
        self.create_failed_message = create_failed_message

    @property
    def auto_creates(self) -> bool:
        """Whether unknown names are created on demand."""
        return self.create is not None

    def resolve(self, names: Iterable[str], label: str) -> Resolution:
        """
        Resolve *names* for the row identified by *label*.

        Blank names are ignored and an id referenced twice is assigned once, keeping the position
        of its first occurrence.
        """
        resolution = Resolution()
        for raw_name in names:
            name = raw_name.strip()
            if not name:
                continue
            try:
                pk = self.resolve_one(name, label)
            except ReferenceResolutionError as exc:
                resolution.errors.append(str(exc))
                continue
            if pk not in resolution.ids:
                resolution.ids.append(pk)
        return resolution

    def resolve_one(self, name: str, label: str) -> int:
        """Return the id for *name*, creating it when allowed; raise on failure."""
        pk = self.scope.lookup(name)
        if pk is not None:
            return pk

        if self.create is None:
            raise ReferenceResolutionError(self.not_found_message.format(label=label, name=name))

        try:
            pk = self.create(name)
        except BackendError as exc:
            logger.warning("csv_reference_create_failed", name=name, error=str(exc))
            raise ReferenceResolutionError(
                self.create_failed_message.format(label=label, name=name, error=exc),
            ) from exc

        logger.debug("csv_reference_created", name=name, pk=pk)
        self.scope.remember(name, pk)
        return pk
