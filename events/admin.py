"""
Admin configuration for event management.

This module defines the Django admin interfaces for the Event model and the event-scoped Speaker,
Session, Exhibitor, Sponsor, AttendeeGroup and Attendee models.
"""

from collections.abc import Sequence
from typing import Any, ClassVar

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import (
    Attendee,
    AttendeeGroup,
    AttendeeGroupMember,
    Event,
    Exhibitor,
    Session,
    SessionSpeaker,
    Speaker,
    Sponsor,
)


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    """Admin configuration for the Event model."""

    list_display = (
        "name",
        "slug",
        "year",
        "start_date",
        "end_date",
        "is_active",
        "session_count",
    )
    list_filter = ("is_active",)
    search_fields = ("name", "slug", "location")
    prepopulated_fields: ClassVar[dict[str, Sequence[str]]] = {"slug": ("name",)}
    fieldsets: ClassVar[list[Any]] = [
        (
            None,
            {
                "fields": (
                    "name",
                    "slug",
                    "year",
                    "is_active",
                ),
            },
        ),
        (
            _("Schedule"),
            {
                "fields": (
                    "location",
                    "start_date",
                    "end_date",
                    "description",
                ),
            },
        ),
    ]

    @admin.display(description=_("Sessions"))
    def session_count(self, obj: Event) -> int:
        """Display the number of sessions scheduled for this event."""
        return obj.sessions.count()


@admin.register(Speaker)
class SpeakerAdmin(admin.ModelAdmin):
    """Admin configuration for the Speaker model."""

    list_display = ("full_name", "credentials", "institution", "email", "event")
    list_filter = ("event",)
    search_fields = ("full_name", "email", "institution")


class SessionSpeakerInline(admin.TabularInline):
    """Inline editor for the speakers assigned to a session."""

    model = SessionSpeaker
    extra = 0
    autocomplete_fields: ClassVar[list[str]] = ["speaker"]
    ordering = ("display_order",)


@admin.register(Session)
class SessionAdmin(admin.ModelAdmin):
    """Admin configuration for the Session model."""

    list_display = (
        "title",
        "session_type",
        "session_date",
        "start_time",
        "end_time",
        "location",
        "speaker_count",
    )
    list_filter = ("event", "session_type", "session_date", "track")
    search_fields = ("title", "description", "location", "track")
    inlines: ClassVar[list[type[admin.TabularInline]]] = [SessionSpeakerInline]

    @admin.display(description=_("Speakers"))
    def speaker_count(self, obj: Session) -> int:
        """Display the number of speakers assigned to this session."""
        return obj.speaker_assignments.count()


@admin.register(Exhibitor)
class ExhibitorAdmin(admin.ModelAdmin):
    """Admin configuration for the Exhibitor model."""

    list_display = ("company_name", "booth_number", "category", "contact_name", "event")
    list_filter = ("event", "category")
    search_fields = ("company_name", "contact_name", "contact_email")


@admin.register(Sponsor)
class SponsorAdmin(admin.ModelAdmin):
    """Admin configuration for the Sponsor model."""

    list_display = ("company_name", "tier", "is_featured", "display_order", "event")
    list_filter = ("event", "tier", "is_featured")
    list_editable = ("display_order",)
    search_fields = ("company_name", "contact_name", "contact_email")


class AttendeeGroupMemberInline(admin.TabularInline):
    """Inline editor for group memberships."""

    model = AttendeeGroupMember
    extra = 0
    autocomplete_fields: ClassVar[list[str]] = ["attendee"]


@admin.register(AttendeeGroup)
class AttendeeGroupAdmin(admin.ModelAdmin):
    """Admin configuration for the AttendeeGroup model."""

    list_display = ("name", "color", "member_count", "event")
    list_filter = ("event",)
    search_fields = ("name",)
    inlines: ClassVar[list[type[admin.TabularInline]]] = [AttendeeGroupMemberInline]

    @admin.display(description=_("Members"))
    def member_count(self, obj: AttendeeGroup) -> int:
        """Display the number of attendees in this group."""
        return obj.memberships.count()


@admin.register(Attendee)
class AttendeeAdmin(admin.ModelAdmin):
    """Admin configuration for the Attendee model."""

    list_display = ("first_name", "last_name", "email", "badge_type", "checked_in", "event")
    list_filter = ("event", "badge_type", "checked_in")
    search_fields = ("first_name", "last_name", "email")
