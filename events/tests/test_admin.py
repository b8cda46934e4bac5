"""Tests for the event admin interface."""
# ruff: noqa: PLR2004

from __future__ import annotations

import datetime as dt
from http import HTTPStatus
from typing import TYPE_CHECKING

import pytest
from django.contrib.admin import AdminSite
from django.contrib.auth import get_user_model
from django.urls import reverse
from model_bakery import baker

from events.admin import AttendeeGroupAdmin, EventAdmin, SessionAdmin
from events.models import (
    AttendeeGroup,
    AttendeeGroupMember,
    Event,
    Session,
    SessionSpeaker,
)


if TYPE_CHECKING:
    from django.contrib.auth.models import AbstractUser
    from django.test.client import Client


@pytest.fixture()
def superuser() -> AbstractUser:
    """Create a superuser for admin access."""
    return get_user_model().objects.create_superuser(
        username="admin",
        email="admin@example.com",
        password="password",
    )


@pytest.mark.django_db
class TestEventAdmin:
    """Tests for the EventAdmin configuration and views."""

    def test_prepopulated_fields(self) -> None:
        """Verify slug is prepopulated from name."""
        assert EventAdmin.prepopulated_fields == {"slug": ("name",)}

    def test_session_count(self) -> None:
        """session_count counts the sessions of the event only."""
        event = baker.make(Event)
        baker.make(Session, event=event, start_time=dt.time(9), end_time=dt.time(10), _quantity=2)
        baker.make(Session, start_time=dt.time(9), end_time=dt.time(10))
        assert EventAdmin(Event, AdminSite()).session_count(event) == 2

    def test_changelist_view(self, client: Client, superuser: AbstractUser) -> None:
        """Verify the event changelist page loads successfully."""
        client.force_login(superuser)
        baker.make(Event, name="Test Event", slug="test-event", year=2026)
        response = client.get(reverse("admin:events_event_changelist"))
        assert response.status_code == HTTPStatus.OK
        assert "Test Event" in response.content.decode()

    def test_add_event_post(self, client: Client, superuser: AbstractUser) -> None:
        """Verify creating a new event via admin POST works."""
        client.force_login(superuser)
        response = client.post(
            reverse("admin:events_event_add"),
            {
                "name": "New Event 2026",
                "slug": "new-event-2026",
                "year": 2026,
                "location": "",
                "description": "",
                "is_active": True,
            },
        )
        assert response.status_code == HTTPStatus.FOUND
        assert Event.objects.filter(slug="new-event-2026").exists()


@pytest.mark.django_db
class TestEventScopedAdmins:
    """Tests for the admins of the imported entity kinds."""

    def test_speaker_count(self) -> None:
        """speaker_count counts assignments of the session."""
        session = baker.make(Session, start_time=dt.time(9), end_time=dt.time(10))
        baker.make(SessionSpeaker, session=session, _quantity=3)
        assert SessionAdmin(Session, AdminSite()).speaker_count(session) == 3

    def test_member_count(self) -> None:
        """member_count counts memberships of the group."""
        group = baker.make(AttendeeGroup)
        baker.make(AttendeeGroupMember, group=group, _quantity=2)
        assert AttendeeGroupAdmin(AttendeeGroup, AdminSite()).member_count(group) == 2

    @pytest.mark.parametrize(
        "model_name",
        ["speaker", "session", "exhibitor", "sponsor", "attendeegroup", "attendee"],
    )
    def test_changelist_views(
        self,
        client: Client,
        superuser: AbstractUser,
        model_name: str,
    ) -> None:
        """Every event-scoped changelist loads."""
        client.force_login(superuser)
        response = client.get(reverse(f"admin:events_{model_name}_changelist"))
        assert response.status_code == HTTPStatus.OK
