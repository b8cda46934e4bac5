"""Tests for the example CSV templates."""
# ruff: noqa: PLR2004

import re
from collections.abc import Iterable

import pytest
from model_bakery import baker

from events.models import Event, Session, Speaker
from imports.csv_templates import generate_template, render_csv
from imports.normalizers import NORMALIZERS
from imports.pipeline import KIND_SPECS, bulk_create_sessions, bulk_create_speakers, bulk_import
from imports.tokenizer import parse_csv
from imports.types import EntityKind


_WORDS = re.compile(r"[^\s,;]+")


def words(values: Iterable[str]) -> set[str]:
    """Return the lowercased words of *values*, split on whitespace and list separators."""
    return {word for value in values for word in _WORDS.findall(value.lower())}


class TestRenderCsv:
    """Verify template rendering."""

    def test_values_are_quoted(self) -> None:
        """Headers stay verbatim, values are quoted with embedded quotes doubled."""
        assert render_csv(["a", "b"], [['x, y', 'say "hi"']]) == 'a,b\n"x, y","say ""hi"""'


class TestGenerateTemplate:
    """Verify every kind has a usable template."""

    @pytest.mark.parametrize("kind", list(EntityKind))
    def test_one_to_three_example_rows(self, kind: EntityKind) -> None:
        """Each template has a header and between one and three rows."""
        assert 1 <= len(parse_csv(generate_template(kind))) <= 3

    @pytest.mark.parametrize("kind", list(EntityKind))
    def test_round_trip_keeps_every_value(self, kind: EntityKind) -> None:
        """Every non-empty example cell reaches the canonical row and required checks pass."""
        for raw in parse_csv(generate_template(kind)):
            row = NORMALIZERS[kind](raw)
            assert words(raw.values()) - words(row.present_fields().values()) == set(), raw
            for check in KIND_SPECS[kind].required:
                assert all(getattr(row, name) for name in check.fields)

    def test_accepts_string_kind(self) -> None:
        """Kinds may be given by value."""
        assert generate_template("groups").startswith("name,description,color\n")

    def test_unknown_kind(self) -> None:
        """Unknown kinds are rejected."""
        with pytest.raises(ValueError, match="volunteers"):
            generate_template("volunteers")


@pytest.mark.django_db
class TestTemplateImport:
    """Verify templates import cleanly into an empty event."""

    @pytest.mark.parametrize(
        "kind",
        [EntityKind.SPEAKERS, EntityKind.EXHIBITORS, EntityKind.SPONSORS, EntityKind.GROUPS],
    )
    def test_standalone_templates(self, kind: EntityKind) -> None:
        """Templates without references import every example row."""
        event = baker.make(Event, slug=f"template-{kind}")
        template = generate_template(kind)
        result = bulk_import(kind, event, template)
        assert result.errors == []
        assert result.created == len(parse_csv(template))

    def test_attendee_template_creates_groups(self) -> None:
        """Attendee groups named in the template are created on the fly."""
        event = baker.make(Event, slug="template-attendees")
        result = bulk_import(EntityKind.ATTENDEES, event, generate_template("attendees"))
        assert result.errors == []
        assert result.created == 2
        assert set(event.attendee_groups.values_list("name", flat=True)) == {
            "VIP",
            "Speakers",
            "Sponsors",
        }

    def test_session_template_after_speaker_template(self) -> None:
        """Session speakers resolve against the speakers of the speaker template."""
        event = baker.make(Event, slug="template-sessions")
        bulk_create_speakers(event, generate_template("speakers"))

        result = bulk_create_sessions(event, generate_template("sessions"))

        assert result.errors == []
        assert result.created == 3
        opening = Session.objects.get(event=event, title="Opening Keynote: Future of Dermatology")
        assert opening.session_type == Session.SessionType.KEYNOTE
        assert list(
            opening.speaker_assignments.order_by("display_order").values_list(
                "speaker__full_name",
                flat=True,
            ),
        ) == ["Dr. Jane Smith", "Dr. John Doe"]
        assert Speaker.objects.filter(event=event).count() == 2
