"""
Bulk import orchestrator.

:func:`bulk_import` is the one entry point of the pipeline::

    text -> parse_csv -> normalize -> required fields -> resolve references -> create -> relations

Rows are processed strictly one after another in file order, so a row may reuse an attendee group
auto-created by an earlier row of the same file. Row and reference problems become messages on the
returned :class:`~imports.types.ImportResult`; only a file without data rows stops the import early.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

import structlog

from imports.collaborators import (
    AttendeeCollaborator,
    ExhibitorCollaborator,
    GroupCollaborator,
    ModelCollaborator,
    SessionCollaborator,
    SpeakerCollaborator,
    SponsorCollaborator,
    add_attendee_to_groups,
    assign_session_speakers,
)
from imports.context import ImportContext
from imports.errors import (
    BackendError,
    DuplicateKeyError,
    RequiredFieldMissing,
    StructuralError,
)
from imports.normalizers import (
    NORMALIZERS,
    CanonicalRow,
    split_names,
)
from imports.resolver import EntityResolver, NameIndex, ResolutionScope
from imports.tokenizer import parse_csv
from imports.types import NO_ROWS_MESSAGE, EntityKind, ImportResult, RawRow, VerbosityLevel


if TYPE_CHECKING:
    from events.models import Event


logger = structlog.get_logger(__name__)


# ------------------------------------------------------------------
# Per-kind configuration
# ------------------------------------------------------------------


@dataclass(frozen=True)
class RequiredCheck:
    """Fields that must all be present; *message* may use ``{label}``."""

    fields: tuple[str, ...]
    message: str


@dataclass(frozen=True)
class ReferenceSpec:
    """A name-list field pointing at another entity kind."""

    field: str
    kind: EntityKind
    relation: str
    collaborator: Callable[[ImportContext], ModelCollaborator]
    write: Callable[[int, Sequence[int]], None]
    not_found_message: str = 'Not found for "{label}": "{name}"'
    create_failed_message: str = 'Failed to create "{name}": {error}'
    auto_create: bool = False


@dataclass(frozen=True)
class KindSpec:
    """Everything the orchestrator needs to know about one entity kind."""

    kind: EntityKind
    collaborator: Callable[[ImportContext], ModelCollaborator]
    required: tuple[RequiredCheck, ...]
    label_field: str
    duplicate_what: str
    reference: ReferenceSpec | None = None

    def normalize(self, raw: RawRow) -> CanonicalRow:
        return NORMALIZERS[self.kind](raw)

    def label(self, row: CanonicalRow) -> str:
        """Return the best identifying text of *row* for error messages."""
        return getattr(row, self.label_field) or ""


def _group_collaborator(ctx: ImportContext) -> GroupCollaborator:
    return GroupCollaborator(default_color=ctx.default_group_color)


MISSING_NAME = RequiredCheck(("full_name",), "Skipped row: missing name")
MISSING_COMPANY = RequiredCheck(("company_name",), "Skipped row: missing company name")

KIND_SPECS: dict[EntityKind, KindSpec] = {
    EntityKind.SPEAKERS: KindSpec(
        kind=EntityKind.SPEAKERS,
        collaborator=lambda _ctx: SpeakerCollaborator(),
        required=(MISSING_NAME,),
        label_field="full_name",
        duplicate_what="email",
    ),
    EntityKind.SESSIONS: KindSpec(
        kind=EntityKind.SESSIONS,
        collaborator=lambda _ctx: SessionCollaborator(),
        required=(
            RequiredCheck(("title",), "Skipped row: missing title"),
            RequiredCheck(
                ("session_date", "start_time", "end_time"),
                'Skipped "{label}": missing date or time',
            ),
        ),
        label_field="title",
        duplicate_what="session",
        reference=ReferenceSpec(
            field="speaker_names",
            kind=EntityKind.SPEAKERS,
            relation="speakers",
            collaborator=lambda _ctx: SpeakerCollaborator(),
            write=assign_session_speakers,
            not_found_message='Speaker not found for "{label}": "{name}"',
        ),
    ),
    EntityKind.EXHIBITORS: KindSpec(
        kind=EntityKind.EXHIBITORS,
        collaborator=lambda _ctx: ExhibitorCollaborator(),
        required=(MISSING_COMPANY,),
        label_field="company_name",
        duplicate_what="company name",
    ),
    EntityKind.SPONSORS: KindSpec(
        kind=EntityKind.SPONSORS,
        collaborator=lambda _ctx: SponsorCollaborator(),
        required=(MISSING_COMPANY,),
        label_field="company_name",
        duplicate_what="company name",
    ),
    EntityKind.GROUPS: KindSpec(
        kind=EntityKind.GROUPS,
        collaborator=_group_collaborator,
        required=(RequiredCheck(("name",), "Skipped row: missing name"),),
        label_field="name",
        duplicate_what="name",
    ),
    EntityKind.ATTENDEES: KindSpec(
        kind=EntityKind.ATTENDEES,
        collaborator=lambda _ctx: AttendeeCollaborator(),
        required=(
            RequiredCheck(("first_name",), "Skipped row: missing name"),
            RequiredCheck(("email",), 'Skipped "{label}": missing email'),
        ),
        label_field="display_name",
        duplicate_what="email",
        reference=ReferenceSpec(
            field="groups",
            kind=EntityKind.GROUPS,
            relation="groups",
            collaborator=_group_collaborator,
            write=add_attendee_to_groups,
            create_failed_message='Failed to create group "{name}": {error}',
            auto_create=True,
        ),
    ),
}


# ------------------------------------------------------------------
# Steps
# ------------------------------------------------------------------


def tokenize(text: str) -> list[RawRow]:
    """Return the data rows of *text*; raise :class:`StructuralError` when there are none."""
    rows = parse_csv(text)
    if not rows:
        raise StructuralError(NO_ROWS_MESSAGE)
    return rows


def check_required(spec: KindSpec, row: CanonicalRow) -> None:
    """Raise :class:`RequiredFieldMissing` for the first failed check of *spec*."""
    for check in spec.required:
        if any(getattr(row, name) is None for name in check.fields):
            raise RequiredFieldMissing(check.message.format(label=spec.label(row)))


def build_resolver(reference: ReferenceSpec, event: Event, ctx: ImportContext) -> EntityResolver:
    """
    Seed a fresh :class:`ResolutionScope` for one call and wrap it in a resolver.

    The referenced kind's existing names are read once here, not per row.
    """
    collaborator = reference.collaborator(ctx)
    scope = ResolutionScope(existing=NameIndex(collaborator.name_entries(event)))
    ctx.log(
        f"Loaded {len(scope.existing)} existing {reference.kind}",
        VerbosityLevel.DEBUG,
    )

    return EntityResolver(
        scope,
        create=partial(collaborator.create_named, event) if reference.auto_create else None,
        not_found_message=reference.not_found_message,
        create_failed_message=reference.create_failed_message,
    )


# ------------------------------------------------------------------
# Public entry-points
# ------------------------------------------------------------------


def bulk_import(
    kind: EntityKind | str,
    event: Event,
    text: str,
    ctx: ImportContext | None = None,
) -> ImportResult:
    """
    Import every data row of *text* as *kind* records of *event*.

    Never raises for row-level problems: missing required fields, duplicates, backend failures
    and unresolved references all end up in ``ImportResult.errors`` in file order.
    """
    ctx = ctx or ImportContext.from_settings()
    spec = KIND_SPECS[EntityKind(kind)]
    log = logger.bind(kind=str(spec.kind), event_slug=event.slug)

    try:
        rows = tokenize(text)
    except StructuralError as exc:
        log.warning("csv_import_empty")
        ctx.log(str(exc), VerbosityLevel.MINIMAL, "ERROR")
        return ImportResult.structural_failure(str(exc))

    log.info("csv_import_started", rows=len(rows))
    ctx.log(f"Importing {len(rows)} {spec.kind} row(s) into {event}", VerbosityLevel.NORMAL)

    result = ImportResult()
    resolver = None
    if spec.reference is not None:
        try:
            resolver = build_resolver(spec.reference, event, ctx)
        except BackendError as exc:
            log.error("csv_import_seed_failed", error=str(exc))
            result.add_error(f"Failed to load existing {spec.reference.kind}: {exc}")
            return result

    collaborator = spec.collaborator(ctx)
    for line_number, raw in enumerate(rows, start=2):
        import_row(spec, collaborator, resolver, event, raw, result, ctx, line_number)

    log.info("csv_import_finished", created=result.created, errors=len(result.errors))
    return result


def import_row(  # noqa: PLR0913
    spec: KindSpec,
    collaborator: ModelCollaborator,
    resolver: EntityResolver | None,
    event: Event,
    raw: RawRow,
    result: ImportResult,
    ctx: ImportContext,
    line_number: int,
) -> None:
    """Process one raw row, recording its outcome on *result*."""
    log = logger.bind(kind=str(spec.kind), line=line_number)
    row = spec.normalize(raw)
    label = spec.label(row)

    try:
        check_required(spec, row)
    except RequiredFieldMissing as exc:
        log.info("csv_row_skipped", reason=str(exc))
        result.add_error(str(exc))
        ctx.log(f"Line {line_number}: {exc}", VerbosityLevel.DETAILED, "WARNING")
        return

    reference_ids: list[int] = []
    if resolver is not None and spec.reference is not None:
        resolution = resolver.resolve(split_names(getattr(row, spec.reference.field)), label)
        reference_ids = resolution.ids
        for message in resolution.errors:
            log.info("csv_reference_unresolved", reason=message)
            result.add_error(message)

    try:
        pk = collaborator.create(event, row)
    except DuplicateKeyError:
        message = f'Skipped "{label}": duplicate {spec.duplicate_what}'
        log.info("csv_row_skipped", reason=message)
        result.add_error(message)
        ctx.log(f"Line {line_number}: {message}", VerbosityLevel.DETAILED, "WARNING")
        return
    except BackendError as exc:
        message = f'Failed to create "{label}": {exc}'
        log.warning("csv_row_failed", reason=message)
        result.add_error(message)
        ctx.log(f"Line {line_number}: {message}", VerbosityLevel.DETAILED, "ERROR")
        return

    result.record_created()
    ctx.log(f"Created {spec.kind}: {label}", VerbosityLevel.DETAILED, "SUCCESS")

    if reference_ids and spec.reference is not None:
        try:
            spec.reference.write(pk, reference_ids)
        except BackendError as exc:
            message = f'Failed to assign {spec.reference.relation} to "{label}": {exc}'
            log.warning("csv_relation_failed", reason=message)
            result.add_error(message)


def bulk_create_speakers(event: Event, text: str, ctx: ImportContext | None = None) -> ImportResult:
    """Import speakers from CSV text."""
    return bulk_import(EntityKind.SPEAKERS, event, text, ctx)


def bulk_create_sessions(event: Event, text: str, ctx: ImportContext | None = None) -> ImportResult:
    """Import sessions and assign their speakers by name."""
    return bulk_import(EntityKind.SESSIONS, event, text, ctx)


def bulk_create_exhibitors(
    event: Event,
    text: str,
    ctx: ImportContext | None = None,
) -> ImportResult:
    """Import exhibitors from CSV text."""
    return bulk_import(EntityKind.EXHIBITORS, event, text, ctx)


def bulk_create_sponsors(event: Event, text: str, ctx: ImportContext | None = None) -> ImportResult:
    """Import sponsors from CSV text."""
    return bulk_import(EntityKind.SPONSORS, event, text, ctx)


def bulk_create_groups(event: Event, text: str, ctx: ImportContext | None = None) -> ImportResult:
    """Import attendee groups from CSV text."""
    return bulk_import(EntityKind.GROUPS, event, text, ctx)


def bulk_create_attendees(
    event: Event,
    text: str,
    ctx: ImportContext | None = None,
) -> ImportResult:
    """Import attendees, auto-creating referenced groups."""
    return bulk_import(EntityKind.ATTENDEES, event, text, ctx)
