"""Tests for the event models."""
# ruff: noqa: PLR2004

import datetime as dt

import pytest
from django.db import IntegrityError
from model_bakery import baker

from events.models import (
    DEFAULT_GROUP_COLOR,
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


@pytest.mark.django_db
class TestEventModel:
    """Tests for Event model CRUD, constraints, and __str__."""

    def test_create_event(self) -> None:
        """Create an event with all fields and verify it is stored correctly."""
        event = Event.objects.create(
            name="Dermatology Summit 2026",
            slug="derm-2026",
            year=2026,
            location="Boston",
            start_date=dt.date(2026, 3, 15),
            end_date=dt.date(2026, 3, 17),
        )
        assert event.pk is not None
        assert event.is_active is True
        assert event.description == ""

    def test_str_returns_name(self) -> None:
        """__str__ returns the event name."""
        assert str(baker.make(Event, name="My Event 2026")) == "My Event 2026"

    def test_slug_unique_constraint(self) -> None:
        """Two events with the same slug raise IntegrityError."""
        Event.objects.create(name="Event A", slug="same-slug")
        with pytest.raises(IntegrityError):
            Event.objects.create(name="Event B", slug="same-slug")

    def test_end_date_before_start_date(self) -> None:
        """An event cannot end before it starts."""
        with pytest.raises(IntegrityError):
            Event.objects.create(
                name="Backwards",
                slug="backwards",
                start_date=dt.date(2026, 3, 17),
                end_date=dt.date(2026, 3, 15),
            )


@pytest.mark.django_db
class TestSpeakerModel:
    """Tests for Speaker constraints."""

    def test_email_unique_per_event(self) -> None:
        """The same e-mail cannot be used twice within an event."""
        event = baker.make(Event)
        baker.make(Speaker, event=event, email="jane@x.com")
        with pytest.raises(IntegrityError):
            Speaker.objects.create(event=event, full_name="Jane", email="jane@x.com")

    def test_blank_email_may_repeat(self) -> None:
        """Speakers without e-mail do not collide."""
        event = baker.make(Event)
        Speaker.objects.create(event=event, full_name="A")
        Speaker.objects.create(event=event, full_name="B")
        assert event.speakers.count() == 2

    def test_email_may_repeat_across_events(self) -> None:
        """Uniqueness is scoped to one event."""
        baker.make(Speaker, email="jane@x.com")
        baker.make(Speaker, email="jane@x.com")
        assert Speaker.objects.count() == 2

    def test_str(self) -> None:
        """__str__ returns the full name."""
        assert str(baker.make(Speaker, full_name="Dr. Jane Smith")) == "Dr. Jane Smith"


@pytest.mark.django_db
class TestSessionModel:
    """Tests for Session constraints and speaker assignments."""

    def test_defaults(self) -> None:
        """Sessions are presentations unless told otherwise."""
        session = baker.make(Session, start_time=dt.time(9), end_time=dt.time(10))
        assert session.session_type == Session.SessionType.PRESENTATION

    def test_start_after_end(self) -> None:
        """A session cannot end before it starts."""
        with pytest.raises(IntegrityError):
            baker.make(Session, start_time=dt.time(11), end_time=dt.time(10))

    def test_same_slot_is_unique(self) -> None:
        """Title, date and start time identify a session within an event."""
        session = baker.make(Session, start_time=dt.time(9), end_time=dt.time(10))
        with pytest.raises(IntegrityError):
            Session.objects.create(
                event=session.event,
                title=session.title,
                session_date=session.session_date,
                start_time=session.start_time,
                end_time=dt.time(11),
            )

    def test_speakers_through_assignments(self) -> None:
        """Assigned speakers are reachable from the session."""
        session = baker.make(Session, start_time=dt.time(9), end_time=dt.time(10))
        speaker = baker.make(Speaker, event=session.event, full_name="Jane")
        assignment = SessionSpeaker.objects.create(session=session, speaker=speaker)
        assert list(session.speakers.all()) == [speaker]
        assert assignment.role == SessionSpeaker.Role.SPEAKER
        assert str(assignment) == f"Jane (speaker) in {session.title}"


@pytest.mark.django_db
class TestCompanyModels:
    """Tests for Exhibitor and Sponsor."""

    def test_exhibitor_name_unique_per_event(self) -> None:
        """An event lists each exhibiting company once."""
        exhibitor = baker.make(Exhibitor, company_name="Acme")
        with pytest.raises(IntegrityError):
            Exhibitor.objects.create(event=exhibitor.event, company_name="Acme")

    def test_sponsor_defaults(self) -> None:
        """Sponsors default to the partner tier and are not featured."""
        sponsor = Sponsor.objects.create(event=baker.make(Event), company_name="Acme")
        assert sponsor.tier == Sponsor.Tier.PARTNER
        assert sponsor.is_featured is False
        assert str(sponsor) == "Acme"

    def test_sponsor_and_exhibitor_may_share_a_name(self) -> None:
        """Exhibitor and sponsor names are independent."""
        event = baker.make(Event)
        Exhibitor.objects.create(event=event, company_name="Acme")
        Sponsor.objects.create(event=event, company_name="Acme")
        assert event.exhibitors.count() == event.sponsors.count() == 1


@pytest.mark.django_db
class TestAttendeeModels:
    """Tests for Attendee, AttendeeGroup and memberships."""

    def test_group_defaults(self) -> None:
        """Groups get the default badge colour."""
        group = AttendeeGroup.objects.create(event=baker.make(Event), name="VIP")
        assert group.color == DEFAULT_GROUP_COLOR
        assert str(group) == "VIP"

    def test_group_name_unique_per_event(self) -> None:
        """An event has one group of a given name."""
        group = baker.make(AttendeeGroup, name="VIP")
        with pytest.raises(IntegrityError):
            AttendeeGroup.objects.create(event=group.event, name="VIP")

    def test_attendee_full_name(self) -> None:
        """Full name joins first and last name without trailing space."""
        assert baker.make(Attendee, first_name="Jane", last_name="Doe").full_name == "Jane Doe"
        assert str(baker.make(Attendee, first_name="Cher", last_name="")) == "Cher"

    def test_attendee_email_unique_per_event(self) -> None:
        """The same e-mail cannot register twice for one event."""
        attendee = baker.make(Attendee, email="jane@x.com")
        with pytest.raises(IntegrityError):
            Attendee.objects.create(event=attendee.event, first_name="J", email="jane@x.com")

    def test_membership(self) -> None:
        """Members are reachable from both sides of the membership."""
        event = baker.make(Event)
        group = baker.make(AttendeeGroup, event=event, name="VIP")
        attendee = baker.make(Attendee, event=event, first_name="Jane", last_name="Doe")
        membership = AttendeeGroupMember.objects.create(group=group, attendee=attendee)
        assert list(group.members.all()) == [attendee]
        assert list(attendee.groups.all()) == [group]
        assert str(membership) == "Jane Doe in VIP"

    def test_membership_is_unique(self) -> None:
        """An attendee joins a group at most once."""
        membership = baker.make(AttendeeGroupMember)
        with pytest.raises(IntegrityError):
            AttendeeGroupMember.objects.create(
                group=membership.group,
                attendee=membership.attendee,
            )
