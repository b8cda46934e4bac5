"""
Event management module for the admin console.

This module provides the Event model and every event-scoped entity an organizer manages: speakers,
sessions (with their speaker assignments), exhibitors, sponsors, attendee groups and attendees.
"""

from typing import TYPE_CHECKING, ClassVar

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


if TYPE_CHECKING:
    from django_stubs_ext.db.models.manager import RelatedManager


# Constants
DEFAULT_GROUP_COLOR = "#3b82f6"
MAX_COLOR_LENGTH = 20
MAX_COMPANY_NAME_LENGTH = 200
MAX_EVENT_NAME_LENGTH = 200
MAX_EVENT_SLUG_LENGTH = 100
MAX_FIELD_LENGTH = 200
MAX_GROUP_NAME_LENGTH = 100
MAX_PERSON_NAME_LENGTH = 200
MAX_PHONE_LENGTH = 50
MAX_SESSION_TITLE_LENGTH = 250
MAX_SHORT_FIELD_LENGTH = 50


class Event(models.Model):
    """Represents a conference event (e.g., Annual Dermatology Summit 2026)."""

    name = models.CharField(
        unique=True,
        max_length=MAX_EVENT_NAME_LENGTH,
        help_text=_("Display name of the event. Include the year if applicable."),
    )

    slug = models.SlugField(
        max_length=MAX_EVENT_SLUG_LENGTH,
        unique=True,
        null=False,
        blank=False,
        help_text=_("Event slug. Name used in URLs and on the command line."),
    )

    year = models.PositiveSmallIntegerField(
        _("Event year"),
        null=True,
        blank=True,
        validators=[
            MinValueValidator(2000),
            MaxValueValidator(2100),
        ],
    )

    location = models.CharField(
        max_length=MAX_FIELD_LENGTH,
        blank=True,
        default="",
        help_text=_("Venue or city where the event takes place"),
    )

    start_date = models.DateField(
        null=True,
        blank=True,
        help_text=_("First day of the event"),
    )

    end_date = models.DateField(
        null=True,
        blank=True,
        help_text=_("Last day of the event"),
    )

    description = models.TextField(
        blank=True,
        default="",
        help_text=_("Short description of the event"),
    )

    is_active = models.BooleanField(
        default=True,
        help_text=_("Whether this event is currently active and visible on the site"),
    )

    if TYPE_CHECKING:
        speakers: RelatedManager[Speaker]
        sessions: RelatedManager[Session]
        exhibitors: RelatedManager[Exhibitor]
        sponsors: RelatedManager[Sponsor]
        attendee_groups: RelatedManager[AttendeeGroup]
        attendees: RelatedManager[Attendee]

    class Meta:
        """Metadata for the Event model."""

        verbose_name = _("Event")
        verbose_name_plural = _("Events")
        ordering: ClassVar[list[str]] = ["name"]
        constraints: ClassVar[list[models.CheckConstraint]] = [
            models.CheckConstraint(
                condition=models.Q(end_date__gte=models.F("start_date"))
                | models.Q(start_date__isnull=True)
                | models.Q(end_date__isnull=True),
                name="event_start_before_end",
            ),
        ]

    def __str__(self) -> str:
        """Return the event name."""
        return self.name


class Speaker(models.Model):
    """Represents a speaker presenting at an event."""

    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        related_name="speakers",
        help_text=_("Event this speaker belongs to"),
    )
    full_name = models.CharField(
        max_length=MAX_PERSON_NAME_LENGTH,
        help_text=_("Full name of the speaker"),
    )
    credentials = models.CharField(
        max_length=MAX_FIELD_LENGTH,
        blank=True,
        default="",
        help_text=_("Academic or professional credentials (e.g., MD, PhD, PA-C)"),
    )
    bio = models.TextField(
        blank=True,
        default="",
        help_text=_("Biography of the speaker"),
    )
    specialty = models.CharField(
        max_length=MAX_FIELD_LENGTH,
        blank=True,
        default="",
        help_text=_("Professional specialty"),
    )
    institution = models.CharField(
        max_length=MAX_FIELD_LENGTH,
        blank=True,
        default="",
        help_text=_("Institution or affiliation"),
    )
    photo_url = models.URLField(
        blank=True,
        default="",
        help_text=_("URL to the speaker's photo"),
    )
    email = models.EmailField(
        blank=True,
        default="",
        help_text=_("Contact e-mail of the speaker"),
    )
    linkedin_url = models.URLField(
        blank=True,
        default="",
        help_text=_("LinkedIn profile URL"),
    )
    website_url = models.URLField(
        blank=True,
        default="",
        help_text=_("Personal or institutional website"),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Metadata for the Speaker model."""

        verbose_name = _("Speaker")
        verbose_name_plural = _("Speakers")
        ordering: ClassVar[list[str]] = ["full_name"]
        constraints: ClassVar[list[models.UniqueConstraint]] = [
            models.UniqueConstraint(
                fields=["event", "email"],
                condition=~models.Q(email=""),
                name="unique_speaker_email_per_event",
            ),
        ]

    def __str__(self) -> str:
        """Return the speaker name."""
        return self.full_name


class Session(models.Model):
    """Represents a scheduled session of an event's programme."""

    class SessionType(models.TextChoices):
        """Enumeration of session types."""

        KEYNOTE = "keynote", _("Keynote")
        PRESENTATION = "presentation", _("Presentation")
        WORKSHOP = "workshop", _("Workshop")
        PANEL = "panel", _("Panel Discussion")
        SYMPOSIUM = "symposium", _("Symposium")
        BREAKOUT = "breakout", _("Breakout Session")
        NETWORKING = "networking", _("Networking")
        MEAL = "meal", _("Meal Break")
        BREAK = "break", _("Break")
        REGISTRATION = "registration", _("Registration")
        OTHER = "other", _("Other")

    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        related_name="sessions",
        help_text=_("Event this session belongs to"),
    )
    title = models.CharField(
        max_length=MAX_SESSION_TITLE_LENGTH,
        help_text=_("Title of the session"),
    )
    description = models.TextField(
        blank=True,
        default="",
        help_text=_("Session description"),
    )
    session_type = models.CharField(
        max_length=MAX_SHORT_FIELD_LENGTH,
        choices=SessionType.choices,
        default=SessionType.PRESENTATION,
        help_text=_("Type of the session"),
    )
    session_date = models.DateField(
        help_text=_("Day on which the session takes place"),
    )
    start_time = models.TimeField(
        help_text=_("Local start time"),
    )
    end_time = models.TimeField(
        help_text=_("Local end time"),
    )
    location = models.CharField(
        max_length=MAX_FIELD_LENGTH,
        blank=True,
        default="",
        help_text=_("Room or location of the session"),
    )
    track = models.CharField(
        max_length=MAX_FIELD_LENGTH,
        blank=True,
        default="",
        help_text=_("Track or category of the session"),
    )
    speakers = models.ManyToManyField(
        Speaker,
        through="SessionSpeaker",
        related_name="sessions",
        help_text=_("Speakers taking part in this session"),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Metadata for the Session model."""

        verbose_name = _("Session")
        verbose_name_plural = _("Sessions")
        ordering: ClassVar[list[str]] = ["session_date", "start_time"]
        constraints: ClassVar[list[models.BaseConstraint]] = [
            models.UniqueConstraint(
                fields=["event", "title", "session_date", "start_time"],
                name="unique_session_slot_per_event",
            ),
            models.CheckConstraint(
                condition=models.Q(start_time__lte=models.F("end_time")),
                name="session_start_before_end",
            ),
        ]

    def __str__(self) -> str:
        """Return the session title."""
        return self.title


class SessionSpeaker(models.Model):
    """Assignment of a speaker to a session, with a role and a display position."""

    class Role(models.TextChoices):
        """Enumeration of the roles a speaker can have in a session."""

        SPEAKER = "speaker", _("Speaker")
        MODERATOR = "moderator", _("Moderator")
        PANELIST = "panelist", _("Panelist")
        CHAIR = "chair", _("Chair")
        CO_CHAIR = "co-chair", _("Co-Chair")

    session = models.ForeignKey(
        Session,
        on_delete=models.CASCADE,
        related_name="speaker_assignments",
    )
    speaker = models.ForeignKey(
        Speaker,
        on_delete=models.CASCADE,
        related_name="session_assignments",
    )
    role = models.CharField(
        max_length=MAX_SHORT_FIELD_LENGTH,
        choices=Role.choices,
        default=Role.SPEAKER,
    )
    display_order = models.PositiveIntegerField(
        default=0,
        help_text=_("Position of the speaker when the session is displayed"),
    )

    class Meta:
        """Metadata for the SessionSpeaker model."""

        verbose_name = _("Session speaker")
        verbose_name_plural = _("Session speakers")
        ordering: ClassVar[list[str]] = ["session", "display_order"]
        constraints: ClassVar[list[models.UniqueConstraint]] = [
            models.UniqueConstraint(
                fields=["session", "speaker"],
                name="unique_speaker_per_session",
            ),
        ]

    def __str__(self) -> str:
        """Return a readable description of the assignment."""
        return f"{self.speaker} ({self.role}) in {self.session}"


class Exhibitor(models.Model):
    """Represents a company exhibiting at an event."""

    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        related_name="exhibitors",
    )
    company_name = models.CharField(
        max_length=MAX_COMPANY_NAME_LENGTH,
        help_text=_("Name of the exhibiting company"),
    )
    description = models.TextField(blank=True, default="")
    booth_number = models.CharField(max_length=MAX_SHORT_FIELD_LENGTH, blank=True, default="")
    logo_url = models.URLField(blank=True, default="")
    banner_url = models.URLField(blank=True, default="")
    website_url = models.URLField(blank=True, default="")
    contact_name = models.CharField(max_length=MAX_PERSON_NAME_LENGTH, blank=True, default="")
    contact_email = models.EmailField(blank=True, default="")
    contact_phone = models.CharField(max_length=MAX_PHONE_LENGTH, blank=True, default="")
    category = models.CharField(max_length=MAX_FIELD_LENGTH, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Metadata for the Exhibitor model."""

        verbose_name = _("Exhibitor")
        verbose_name_plural = _("Exhibitors")
        ordering: ClassVar[list[str]] = ["company_name"]
        constraints: ClassVar[list[models.UniqueConstraint]] = [
            models.UniqueConstraint(
                fields=["event", "company_name"],
                name="unique_exhibitor_per_event",
            ),
        ]

    def __str__(self) -> str:
        """Return the company name."""
        return self.company_name


class Sponsor(models.Model):
    """Represents a company sponsoring an event."""

    class Tier(models.TextChoices):
        """Enumeration of sponsorship tiers, highest first."""

        PLATINUM = "platinum", _("Platinum")
        GOLD = "gold", _("Gold")
        SILVER = "silver", _("Silver")
        BRONZE = "bronze", _("Bronze")
        PARTNER = "partner", _("Partner")

    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        related_name="sponsors",
    )
    company_name = models.CharField(
        max_length=MAX_COMPANY_NAME_LENGTH,
        help_text=_("Name of the sponsoring company"),
    )
    description = models.TextField(blank=True, default="")
    tier = models.CharField(
        max_length=MAX_SHORT_FIELD_LENGTH,
        choices=Tier.choices,
        default=Tier.PARTNER,
    )
    logo_url = models.URLField(blank=True, default="")
    banner_url = models.URLField(blank=True, default="")
    website_url = models.URLField(blank=True, default="")
    contact_name = models.CharField(max_length=MAX_PERSON_NAME_LENGTH, blank=True, default="")
    contact_email = models.EmailField(blank=True, default="")
    booth_number = models.CharField(max_length=MAX_SHORT_FIELD_LENGTH, blank=True, default="")
    display_order = models.PositiveIntegerField(default=0)
    is_featured = models.BooleanField(
        default=False,
        help_text=_("Featured sponsors are highlighted in the attendee app"),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Metadata for the Sponsor model."""

        verbose_name = _("Sponsor")
        verbose_name_plural = _("Sponsors")
        ordering: ClassVar[list[str]] = ["display_order", "company_name"]
        constraints: ClassVar[list[models.UniqueConstraint]] = [
            models.UniqueConstraint(
                fields=["event", "company_name"],
                name="unique_sponsor_per_event",
            ),
        ]

    def __str__(self) -> str:
        """Return the company name."""
        return self.company_name


class AttendeeGroup(models.Model):
    """A named group of attendees (e.g., VIP, Press) used for targeting announcements."""

    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        related_name="attendee_groups",
    )
    name = models.CharField(
        max_length=MAX_GROUP_NAME_LENGTH,
        help_text=_("Name of the group"),
    )
    description = models.TextField(blank=True, default="")
    color = models.CharField(
        max_length=MAX_COLOR_LENGTH,
        blank=True,
        default=DEFAULT_GROUP_COLOR,
        help_text=_("Badge colour used to display the group"),
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Metadata for the AttendeeGroup model."""

        verbose_name = _("Attendee group")
        verbose_name_plural = _("Attendee groups")
        ordering: ClassVar[list[str]] = ["name"]
        constraints: ClassVar[list[models.UniqueConstraint]] = [
            models.UniqueConstraint(
                fields=["event", "name"],
                name="unique_group_name_per_event",
            ),
        ]

    def __str__(self) -> str:
        """Return the group name."""
        return self.name


class Attendee(models.Model):
    """Represents a registered attendee of an event."""

    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        related_name="attendees",
    )
    first_name = models.CharField(max_length=MAX_PERSON_NAME_LENGTH)
    last_name = models.CharField(max_length=MAX_PERSON_NAME_LENGTH, blank=True, default="")
    email = models.EmailField()
    phone = models.CharField(max_length=MAX_PHONE_LENGTH, blank=True, default="")
    specialty = models.CharField(max_length=MAX_FIELD_LENGTH, blank=True, default="")
    institution = models.CharField(max_length=MAX_FIELD_LENGTH, blank=True, default="")
    title = models.CharField(max_length=MAX_FIELD_LENGTH, blank=True, default="")
    badge_type = models.CharField(
        max_length=MAX_SHORT_FIELD_LENGTH,
        default="attendee",
        help_text=_("Badge printed for the attendee (e.g., attendee, vip, press)"),
    )
    qr_data = models.JSONField(
        null=True,
        blank=True,
        help_text=_("Payload encoded in the badge QR code"),
    )
    checked_in = models.BooleanField(default=False)
    checked_in_at = models.DateTimeField(null=True, blank=True)
    groups = models.ManyToManyField(
        AttendeeGroup,
        through="AttendeeGroupMember",
        related_name="members",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Metadata for the Attendee model."""

        verbose_name = _("Attendee")
        verbose_name_plural = _("Attendees")
        ordering: ClassVar[list[str]] = ["last_name", "first_name"]
        constraints: ClassVar[list[models.UniqueConstraint]] = [
            models.UniqueConstraint(
                fields=["event", "email"],
                name="unique_attendee_email_per_event",
            ),
        ]

    def __str__(self) -> str:
        """Return the attendee's full name."""
        return self.full_name

    @property
    def full_name(self) -> str:
        """Return first and last name joined by a space."""
        return f"{self.first_name} {self.last_name}".strip()


class AttendeeGroupMember(models.Model):
    """Membership of an attendee in an attendee group."""

    group = models.ForeignKey(
        AttendeeGroup,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    attendee = models.ForeignKey(
        Attendee,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Metadata for the AttendeeGroupMember model."""

        verbose_name = _("Attendee group member")
        verbose_name_plural = _("Attendee group members")
        constraints: ClassVar[list[models.UniqueConstraint]] = [
            models.UniqueConstraint(
                fields=["group", "attendee"],
                name="unique_attendee_per_group",
            ),
        ]

    def __str__(self) -> str:
        """Return a readable description of the membership."""
        return f"{self.attendee} in {self.group}"
