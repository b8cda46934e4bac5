"""
Row normalizers: map raw, dialect-ambiguous CSV fields onto canonical rows.

Two column dialects are understood: the console's own export format and the attendee-app export
format used by third-party conference tools (Whova), whose headers are often prefixed with ``*``
for required columns and split person names into first / last columns.

Each entity kind has a declarative table mapping a canonical field to an *ordered* tuple of
candidate raw keys (own key first, then the alternates). The first candidate with a non-empty value
wins; when none matches the field is absent, never guessed. A handful of composition rules (split
names, separator-delimited name lists, session type from tags) run after the table lookup.

Dates, times and locations pass through as opaque strings. Parsing them is the job of the
persistence adapters in :mod:`~imports.collaborators`.
"""

import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from imports.types import EntityKind, RawRow


type FieldTable = Mapping[str, tuple[str, ...]]

_NAME_SEPARATORS = re.compile(r"[;,]")
_CREDENTIAL_SUFFIX = re.compile(r",\s*(.+)$")


# ------------------------------------------------------------------
# Canonical rows
# ------------------------------------------------------------------


class CanonicalRow(BaseModel):
    """
    Base class of the per-kind canonical rows.

    Every present field is a trimmed, non-empty string; blank input is stored as ``None``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _drop_blank_values(cls, data: Any) -> Any:
        """Trim string values and turn empty ones into absence."""
        if not isinstance(data, Mapping):
            return data
        cleaned: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip() or None  # noqa: PLW2901
            cleaned[key] = value
        return cleaned

    def present_fields(self) -> dict[str, str]:
        """Return the fields that carry a value."""
        return self.model_dump(exclude_none=True)


class SpeakerRow(CanonicalRow):
    """Canonical speaker row."""

    full_name: str | None = None
    credentials: str | None = None
    bio: str | None = None
    specialty: str | None = None
    institution: str | None = None
    email: str | None = None
    linkedin_url: str | None = None
    website_url: str | None = None


class SessionRow(CanonicalRow):
    """Canonical session row; ``speaker_names`` is a comma-separated list of speaker names."""

    title: str | None = None
    description: str | None = None
    session_type: str | None = None
    session_date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    location: str | None = None
    track: str | None = None
    speaker_names: str | None = None


class ExhibitorRow(CanonicalRow):
    """Canonical exhibitor row."""

    company_name: str | None = None
    description: str | None = None
    booth_number: str | None = None
    website_url: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    category: str | None = None


class SponsorRow(CanonicalRow):
    """Canonical sponsor row; ``tier`` and ``is_featured`` are still the raw CSV text."""

    company_name: str | None = None
    description: str | None = None
    tier: str | None = None
    website_url: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    booth_number: str | None = None
    is_featured: str | None = None
    logo_url: str | None = None
    banner_url: str | None = None


class GroupRow(CanonicalRow):
    """Canonical attendee group row."""

    name: str | None = None
    description: str | None = None
    color: str | None = None


class AttendeeRow(CanonicalRow):
    """Canonical attendee row; ``groups`` is a comma-separated list of group names."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    badge_type: str | None = None
    phone: str | None = None
    specialty: str | None = None
    institution: str | None = None
    title: str | None = None
    groups: str | None = None

    @property
    def display_name(self) -> str:
        """Return first and last name joined by a space."""
        return join_name(self.first_name, self.last_name)


# ------------------------------------------------------------------
# Candidate tables (canonical field -> ordered raw keys)
# ------------------------------------------------------------------

SPEAKER_FIELDS: FieldTable = {
    "full_name": ("full_name", "*name", "name"),
    "credentials": ("credentials", "position"),
    "bio": ("bio",),
    "specialty": ("specialty",),
    "institution": ("institution", "affiliation"),
    "email": ("email", "*email"),
    "linkedin_url": ("linkedin_url",),
    "website_url": ("website_url",),
}
SPEAKER_FIRST_NAME = ("first_name", "*first_name")
SPEAKER_LAST_NAME = ("last_name", "*last_name")

SESSION_FIELDS: FieldTable = {
    "title": ("title", "session_title"),
    "description": ("description",),
    "session_type": ("session_type",),
    "session_date": ("session_date", "date"),
    "start_time": ("start_time", "time_start"),
    "end_time": ("end_time", "time_end"),
    "location": ("location", "room/location", "room_location"),
    "track": ("track", "tracks"),
    "speaker_names": ("speaker_names", "speakers"),
}
SESSION_TAGS = ("tags",)

EXHIBITOR_FIELDS: FieldTable = {
    "company_name": ("company_name", "*company_name"),
    "description": ("description",),
    "booth_number": ("booth_number",),
    "website_url": ("website_url", "website", "*website"),
    "contact_name": ("contact_name",),
    "contact_email": ("contact_email", "*email", "email"),
    "contact_phone": ("contact_phone", "phone"),
    "category": ("category",),
}
CONTACT_FIRST_NAME = ("contact_first_name", "*contact_first_name")
CONTACT_LAST_NAME = ("contact_last_name", "*contact_last_name")

SPONSOR_FIELDS: FieldTable = {
    "company_name": ("company_name", "*company_name"),
    "description": ("description",),
    "tier": ("tier", "*tier"),
    "website_url": ("website_url", "*website", "website"),
    "contact_name": ("contact_name",),
    "contact_email": ("contact_email", "*email", "email"),
    "booth_number": ("booth_number",),
    "is_featured": ("is_featured", "featured", "featured_(yes/no)"),
    "logo_url": ("logo_url",),
    "banner_url": ("banner_url",),
}

GROUP_FIELDS: FieldTable = {
    "name": ("name", "group_name", "*name"),
    "description": ("description",),
    "color": ("color", "colour"),
}

ATTENDEE_FIELDS: FieldTable = {
    "first_name": ("first_name", "*first_name"),
    "last_name": ("last_name", "*last_name"),
    "email": ("email", "*email"),
    "badge_type": ("badge_type", "registration_type", "ticket_type"),
    "phone": ("phone",),
    "specialty": ("specialty",),
    "institution": ("institution", "affiliation", "company"),
    "title": ("title", "position"),
    "groups": ("groups",),
}
ATTENDEE_FULL_NAME = ("full_name", "*name", "name")

#: Session types recognised in the attendee-app ``tags`` column, checked in order.
TAG_SESSION_TYPES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("keynote",), "keynote"),
    (("workshop",), "workshop"),
    (("panel",), "panel"),
    (("meal", "lunch", "breakfast", "dinner"), "meal"),
    (("break",), "break"),
    (("networking",), "networking"),
)

#: Canonical fields holding e-mail addresses (lowercased after trimming).
EMAIL_FIELDS = frozenset({"email", "contact_email"})


# ------------------------------------------------------------------
# Table helpers
# ------------------------------------------------------------------


def first_present(row: RawRow, candidates: Iterable[str]) -> str | None:
    """Return the first non-empty (trimmed) value among *candidates*, or ``None``."""
    for key in candidates:
        value = row.get(key, "").strip()
        if value:
            return value
    return None


def apply_table(row: RawRow, table: FieldTable) -> dict[str, str]:
    """Resolve every canonical field of *table* against *row*; absent fields are left out."""
    fields: dict[str, str] = {}
    for canonical, candidates in table.items():
        value = first_present(row, candidates)
        if value is None:
            continue
        fields[canonical] = value.lower() if canonical in EMAIL_FIELDS else value
    return fields


def join_name(first: str | None, last: str | None) -> str:
    """Join name parts with a single space, skipping missing parts."""
    return " ".join(part for part in (first, last) if part).strip()


def split_names(value: str | None) -> list[str]:
    """
    Split a ``;`` or ``,`` separated list of names, trimming each and dropping blanks.

    >>> split_names(" Dr. Jane Smith; John Doe ,")
    ['Dr. Jane Smith', 'John Doe']
    """
    if not value:
        return []
    return [name.strip() for name in _NAME_SEPARATORS.split(value) if name.strip()]


def _name_list(value: str | None) -> str | None:
    """Normalize a separator-delimited name list to single commas, or ``None`` when empty."""
    return ",".join(split_names(value)) or None


def session_type_from_tags(tags: str | None) -> str | None:
    """Derive a session type from an attendee-app tag list (``"keynote, featured"``)."""
    if not tags:
        return None
    lowered = tags.lower()
    for keywords, session_type in TAG_SESSION_TYPES:
        if any(keyword in lowered for keyword in keywords):
            return session_type
    return None


# ------------------------------------------------------------------
# Per-kind normalizers
# ------------------------------------------------------------------


def normalize_speaker_row(row: RawRow) -> SpeakerRow:
    """
    Normalize a speaker row.

    When no combined name column is filled, the full name is composed from the first / last name
    columns. Credentials fall back to the suffix after a comma in the last name
    (``"Smith, MD"`` gives ``"MD"``).
    """
    fields = apply_table(row, SPEAKER_FIELDS)
    last_name = first_present(row, SPEAKER_LAST_NAME)

    if "full_name" not in fields:
        composed = join_name(first_present(row, SPEAKER_FIRST_NAME), last_name)
        if composed:
            fields["full_name"] = composed

    if "credentials" not in fields and last_name:
        match = _CREDENTIAL_SUFFIX.search(last_name)
        if match:
            fields["credentials"] = match.group(1)

    return SpeakerRow(**fields)


def normalize_session_row(row: RawRow) -> SessionRow:
    """Normalize a session row; the speaker list is rewritten to comma-separated names."""
    fields = apply_table(row, SESSION_FIELDS)

    speaker_names = _name_list(fields.pop("speaker_names", None))
    if speaker_names:
        fields["speaker_names"] = speaker_names

    if "session_type" not in fields:
        derived = session_type_from_tags(first_present(row, SESSION_TAGS))
        if derived:
            fields["session_type"] = derived

    return SessionRow(**fields)


def _with_contact_name(row: RawRow, fields: dict[str, str]) -> dict[str, str]:
    """Compose ``contact_name`` from split contact columns when the combined one is empty."""
    if "contact_name" not in fields:
        composed = join_name(
            first_present(row, CONTACT_FIRST_NAME),
            first_present(row, CONTACT_LAST_NAME),
        )
        if composed:
            fields["contact_name"] = composed
    return fields


def normalize_exhibitor_row(row: RawRow) -> ExhibitorRow:
    """Normalize an exhibitor row."""
    return ExhibitorRow(**_with_contact_name(row, apply_table(row, EXHIBITOR_FIELDS)))


def normalize_sponsor_row(row: RawRow) -> SponsorRow:
    """Normalize a sponsor row."""
    return SponsorRow(**_with_contact_name(row, apply_table(row, SPONSOR_FIELDS)))


def normalize_group_row(row: RawRow) -> GroupRow:
    """Normalize an attendee group row."""
    return GroupRow(**apply_table(row, GROUP_FIELDS))


def normalize_attendee_row(row: RawRow) -> AttendeeRow:
    """
    Normalize an attendee row.

    A combined full name is split on whitespace (first token / rest) when neither name column
    is filled.
    """
    fields = apply_table(row, ATTENDEE_FIELDS)

    if "first_name" not in fields and "last_name" not in fields:
        full_name = first_present(row, ATTENDEE_FULL_NAME)
        if full_name:
            first, _, rest = full_name.partition(" ")
            fields["first_name"] = first
            if rest.strip():
                fields["last_name"] = rest.strip()

    groups = _name_list(fields.pop("groups", None))
    if groups:
        fields["groups"] = groups

    return AttendeeRow(**fields)


NORMALIZERS: dict[EntityKind, Callable[[RawRow], CanonicalRow]] = {
    EntityKind.SPEAKERS: normalize_speaker_row,
    EntityKind.SESSIONS: normalize_session_row,
    EntityKind.EXHIBITORS: normalize_exhibitor_row,
    EntityKind.SPONSORS: normalize_sponsor_row,
    EntityKind.GROUPS: normalize_group_row,
    EntityKind.ATTENDEES: normalize_attendee_row,
}

#: Candidate tables keyed by entity kind, for inspection and dialect tests.
FIELD_CANDIDATES: dict[EntityKind, FieldTable] = {
    EntityKind.SPEAKERS: SPEAKER_FIELDS,
    EntityKind.SESSIONS: SESSION_FIELDS,
    EntityKind.EXHIBITORS: EXHIBITOR_FIELDS,
    EntityKind.SPONSORS: SPONSOR_FIELDS,
    EntityKind.GROUPS: GROUP_FIELDS,
    EntityKind.ATTENDEES: ATTENDEE_FIELDS,
}
