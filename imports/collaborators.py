"""
Persistence adapters between canonical rows and the :mod:`events` models.

Each adapter exposes ``list(event)`` (existing records of the event) and ``create(event, row)``
(returns the new primary key). Database and validation errors are translated into
:class:`~imports.errors.DuplicateKeyError` or :class:`~imports.errors.BackendError`; every write
runs in its own savepoint so a failing row leaves the surrounding transaction usable.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, ClassVar

from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError, models, transaction

from events.models import (
    DEFAULT_GROUP_COLOR,
    Attendee,
    AttendeeGroup,
    AttendeeGroupMember,
    Exhibitor,
    Session,
    SessionSpeaker,
    Speaker,
    Sponsor,
)
from imports.errors import BackendError, DuplicateKeyError
from imports.normalizers import GroupRow


if TYPE_CHECKING:
    from events.models import Event
    from imports.normalizers import (
        AttendeeRow,
        CanonicalRow,
        ExhibitorRow,
        SessionRow,
        SpeakerRow,
        SponsorRow,
    )


UNIQUE_VIOLATION_SQLSTATE = "23505"

DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y")
TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M:%S %p", "%I:%M%p")

TRUTHY_VALUES = frozenset({"yes", "true", "1"})
FEATURED_TIERS = frozenset({Sponsor.Tier.PLATINUM, Sponsor.Tier.GOLD})

#: Loose session type spellings of exported schedules.
SESSION_TYPE_ALIASES = {
    "session": Session.SessionType.PRESENTATION,
    "talk": Session.SessionType.PRESENTATION,
    "lunch": Session.SessionType.MEAL,
    "breakfast": Session.SessionType.MEAL,
    "dinner": Session.SessionType.MEAL,
}


# ------------------------------------------------------------------
# Error translation
# ------------------------------------------------------------------


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return ``True`` when *exc* was raised by a uniqueness constraint."""
    cause = exc.__cause__
    sqlstate = getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    if sqlstate == UNIQUE_VIOLATION_SQLSTATE:
        return True
    message = str(exc).lower()
    return "unique constraint" in message or "duplicate key" in message


def format_validation_error(exc: ValidationError) -> str:
    """
    Flatten a Django :class:`ValidationError` into one line.

    >>> format_validation_error(ValidationError({"email": ["Enter a valid email address."]}))
    'email: Enter a valid email address.'
    """
    if hasattr(exc, "error_dict"):
        return "; ".join(
            f"{field}: {' '.join(messages)}" for field, messages in exc.message_dict.items()
        )
    return "; ".join(exc.messages)


# ------------------------------------------------------------------
# Value parsing
# ------------------------------------------------------------------


def parse_date(value: str | None, field: str) -> dt.date | None:
    """Parse an ISO (``2025-03-15``) or US (``03/15/2025``) date."""
    if not value:
        return None
    for fmt in DATE_FORMATS:
        try:
            return dt.datetime.strptime(value, fmt).date()  # noqa: DTZ007
        except ValueError:
            continue
    raise ValidationError({field: [f'Unrecognised date "{value}".']})


def parse_time(value: str | None, field: str) -> dt.time | None:
    """Parse a 24-hour (``14:30``, ``14:30:00``) or 12-hour (``2:30 PM``) time."""
    if not value:
        return None
    for fmt in TIME_FORMATS:
        try:
            return dt.datetime.strptime(value.upper(), fmt).time()  # noqa: DTZ007
        except ValueError:
            continue
    raise ValidationError({field: [f'Unrecognised time "{value}".']})


def parse_session_type(value: str | None) -> str:
    """Map free text onto a :class:`~events.models.Session.SessionType` value."""
    if not value:
        return Session.SessionType.PRESENTATION
    key = "_".join(value.lower().replace("-", " ").split())
    if key in Session.SessionType.values:
        return key
    return SESSION_TYPE_ALIASES.get(key, Session.SessionType.OTHER)


def parse_sponsor_tier(value: str | None) -> str:
    """Lowercase *value*; unknown or missing tiers fall back to ``partner``."""
    tier = (value or "").strip().lower()
    return tier if tier in Sponsor.Tier.values else Sponsor.Tier.PARTNER


def parse_featured(value: str | None, tier: str) -> bool:
    """An explicit yes/no wins; otherwise platinum and gold sponsors are featured."""
    if value:
        return value.strip().lower() in TRUTHY_VALUES
    return tier in FEATURED_TIERS


# ------------------------------------------------------------------
# Adapters
# ------------------------------------------------------------------


class ModelCollaborator:
    """
    Base adapter for one event-scoped model.

    Subclasses set :attr:`model` and :attr:`name_field` and implement :meth:`build_fields`.
    """

    model: ClassVar[type[models.Model]]
    name_field: ClassVar[str]

    def list(self, event: Event) -> models.QuerySet:
        """Return the existing records of *event*."""
        return self.model.objects.filter(event=event)

    def name_entries(self, event: Event) -> list[tuple[str, int]]:
        """Return ``(name, pk)`` pairs of *event*'s records, for seeding a name index."""
        try:
            return list(self.list(event).values_list(self.name_field, "pk"))
        except DatabaseError as exc:
            raise BackendError(str(exc)) from exc

    def build_fields(self, row: CanonicalRow) -> dict[str, Any]:
        """Return model field values for *row*; may raise :class:`ValidationError`."""
        raise NotImplementedError

    def create(self, event: Event, row: CanonicalRow) -> int:
        """Validate and save one record; return its primary key."""
        try:
            with transaction.atomic():
                instance = self.model(event=event, **self.build_fields(row))
                instance.full_clean(validate_unique=False, validate_constraints=False)
                instance.save()
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise DuplicateKeyError(str(exc)) from exc
            raise BackendError(str(exc)) from exc
        except ValidationError as exc:
            raise BackendError(format_validation_error(exc)) from exc
        except DatabaseError as exc:
            raise BackendError(str(exc)) from exc
        return instance.pk


class SpeakerCollaborator(ModelCollaborator):
    model = Speaker
    name_field = "full_name"

    def build_fields(self, row: SpeakerRow) -> dict[str, Any]:
        return {
            "full_name": row.full_name,
            "credentials": row.credentials or "",
            "bio": row.bio or "",
            "specialty": row.specialty or "",
            "institution": row.institution or "",
            "email": row.email or "",
            "linkedin_url": row.linkedin_url or "",
            "website_url": row.website_url or "",
        }


class SessionCollaborator(ModelCollaborator):
    model = Session
    name_field = "title"

    def build_fields(self, row: SessionRow) -> dict[str, Any]:
        start_time = parse_time(row.start_time, "start_time")
        end_time = parse_time(row.end_time, "end_time")
        if start_time and end_time and end_time < start_time:
            raise ValidationError({"end_time": ["End time must not be before start time."]})
        return {
            "title": row.title,
            "description": row.description or "",
            "session_type": parse_session_type(row.session_type),
            "session_date": parse_date(row.session_date, "session_date"),
            "start_time": start_time,
            "end_time": end_time,
            "location": row.location or "",
            "track": row.track or "",
        }


class ExhibitorCollaborator(ModelCollaborator):
    model = Exhibitor
    name_field = "company_name"

    def build_fields(self, row: ExhibitorRow) -> dict[str, Any]:
        return {
            "company_name": row.company_name,
            "description": row.description or "",
            "booth_number": row.booth_number or "",
            "website_url": row.website_url or "",
            "contact_name": row.contact_name or "",
            "contact_email": row.contact_email or "",
            "contact_phone": row.contact_phone or "",
            "category": row.category or "",
        }


class SponsorCollaborator(ModelCollaborator):
    model = Sponsor
    name_field = "company_name"

    def build_fields(self, row: SponsorRow) -> dict[str, Any]:
        tier = parse_sponsor_tier(row.tier)
        return {
            "company_name": row.company_name,
            "description": row.description or "",
            "tier": tier,
            "website_url": row.website_url or "",
            "contact_name": row.contact_name or "",
            "contact_email": row.contact_email or "",
            "booth_number": row.booth_number or "",
            "is_featured": parse_featured(row.is_featured, tier),
            "logo_url": row.logo_url or "",
            "banner_url": row.banner_url or "",
            "display_order": 0,
        }


class GroupCollaborator(ModelCollaborator):
    """Attendee groups; also the auto-create target of attendee group references."""

    model = AttendeeGroup
    name_field = "name"

    def __init__(self, default_color: str = DEFAULT_GROUP_COLOR) -> None:
        self.default_color = default_color

    def build_fields(self, row: GroupRow) -> dict[str, Any]:
        return {
            "name": row.name,
            "description": row.description or "",
            "color": row.color or self.default_color,
        }

    def create_named(self, event: Event, name: str) -> int:
        """Create a group with default attributes from a bare *name*."""
        return self.create(event, GroupRow(name=name))


class AttendeeCollaborator(ModelCollaborator):
    model = Attendee
    name_field = "email"

    def build_fields(self, row: AttendeeRow) -> dict[str, Any]:
        first_name = row.first_name or ""
        last_name = row.last_name or ""
        email = row.email or ""
        return {
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "phone": row.phone or "",
            "specialty": row.specialty or "",
            "institution": row.institution or "",
            "title": row.title or "",
            "badge_type": row.badge_type or "attendee",
            "qr_data": {"firstName": first_name, "lastName": last_name, "email": email},
        }


# ------------------------------------------------------------------
# Relation writers
# ------------------------------------------------------------------


def _bulk_write(objs: Sequence[models.Model]) -> None:
    if not objs:
        return
    try:
        with transaction.atomic():
            type(objs[0]).objects.bulk_create(objs)
    except DatabaseError as exc:
        raise BackendError(str(exc)) from exc


def assign_session_speakers(session_id: int, speaker_ids: Sequence[int]) -> None:
    """Attach speakers to a session; list order becomes ``display_order``."""
    _bulk_write(
        [
            SessionSpeaker(
                session_id=session_id,
                speaker_id=speaker_id,
                role=SessionSpeaker.Role.SPEAKER,
                display_order=order,
            )
            for order, speaker_id in enumerate(speaker_ids)
        ],
    )


def add_attendee_to_groups(attendee_id: int, group_ids: Sequence[int]) -> None:
    """Make an attendee a member of every group in *group_ids*."""
    _bulk_write(
        [AttendeeGroupMember(attendee_id=attendee_id, group_id=group_id) for group_id in group_ids],
    )
