"""
Example CSV files offered for download next to each import.

Speaker, session, exhibitor and sponsor templates use attendee-app (Whova) export headers, limited
to the columns the importer maps onto a field, so every example value survives an import. Groups
and attendees use the console's own columns. Every value is double-quoted.
"""

from collections.abc import Callable, Sequence

from imports.types import EntityKind


type TemplateRows = Sequence[Sequence[str]]


def render_csv(headers: Sequence[str], rows: TemplateRows) -> str:
    """Render *headers* verbatim and *rows* with every value quoted."""
    lines = [",".join(headers)]
    lines.extend(",".join(_quote(value) for value in row) for row in rows)
    return "\n".join(lines)


def _quote(value: str) -> str:
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def speaker_template() -> str:
    return render_csv(
        ["*Name", "*Email", "Affiliation", "Position", "Bio"],
        [
            [
                "Dr. Jane Smith",
                "jane.smith@example.com",
                "Harvard Medical School",
                "Associate Professor",
                "Leading researcher in dermatology with 20 years of experience.",
            ],
            [
                "Dr. John Doe",
                "john.doe@example.com",
                "Stanford Dermatology",
                "PA-C",
                "Board-certified physician assistant specializing in medical dermatology.",
            ],
        ],
    )


def session_template() -> str:
    return render_csv(
        [
            "Date",
            "Time Start",
            "Time End",
            "Tracks",
            "Session Title",
            "Room/Location",
            "Description",
            "Speakers",
            "Tags",
        ],
        [
            [
                "03/15/2026",
                "9:00 AM",
                "10:00 AM",
                "Clinical",
                "Opening Keynote: Future of Dermatology",
                "Main Ballroom",
                "An inspiring look at emerging trends and technologies.",
                "Dr. Jane Smith; Dr. John Doe",
                "keynote",
            ],
            [
                "03/15/2026",
                "10:30 AM",
                "12:00 PM",
                "Clinical",
                "Advanced Treatment Workshop",
                "Room 101",
                "Hands-on workshop covering latest treatment protocols.",
                "Dr. Jane Smith",
                "workshop",
            ],
            [
                "03/15/2026",
                "12:00 PM",
                "1:00 PM",
                "",
                "Lunch Break",
                "Dining Hall",
                "",
                "",
                "meal",
            ],
        ],
    )


def exhibitor_template() -> str:
    return render_csv(
        [
            "*Company Name",
            "Booth Number",
            "*Contact First Name",
            "*Contact Last Name",
            "*Email",
            "Description",
            "Website",
            "Phone",
            "Category",
        ],
        [
            [
                "Acme Medical Devices",
                "A101",
                "John",
                "Smith",
                "john@acmemedical.com",
                "Leading provider of dermatology equipment and supplies.",
                "https://acmemedical.com",
                "555-987-6543",
                "Medical Devices",
            ],
            [
                "DermTech Solutions",
                "B205",
                "Jane",
                "Doe",
                "jane@dermtech.com",
                "Innovative skincare technology and diagnostic tools.",
                "https://dermtech.com",
                "",
                "Technology",
            ],
        ],
    )


def sponsor_template() -> str:
    return render_csv(
        [
            "*Company Name",
            "*Tier",
            "Booth Number",
            "Description",
            "*Contact First Name",
            "*Contact Last Name",
            "*Email",
            "Website",
            "Featured (yes/no)",
            "Logo URL",
            "Banner URL",
        ],
        [
            [
                "Pfizer Dermatology",
                "Platinum",
                "Main Hall",
                "Global pharmaceutical leader in dermatology treatments.",
                "Sarah",
                "Johnson",
                "sarah.johnson@pfizer.com",
                "https://pfizer.com",
                "yes",
                "https://pfizer.com/logo.png",
                "https://pfizer.com/banner.png",
            ],
            [
                "SkinCare Research Inc",
                "Gold",
                "C102",
                "Advancing dermatological research and innovation.",
                "Michael",
                "Brown",
                "michael@skincare-research.com",
                "https://skincare-research.com",
                "yes",
                "",
                "",
            ],
            [
                "DermConnect",
                "Silver",
                "",
                "Connecting dermatology professionals worldwide.",
                "Emily",
                "Davis",
                "emily@dermconnect.com",
                "https://dermconnect.com",
                "no",
                "",
                "",
            ],
        ],
    )


def group_template() -> str:
    return render_csv(
        ["name", "description", "color"],
        [
            ["Admin", "Event administrators and organizers", "#ef4444"],
            ["Attendee", "General event attendees", "#3b82f6"],
            ["VIP", "VIP guests and special invitees", "#10b981"],
        ],
    )


def attendee_template() -> str:
    return render_csv(
        ["full_name", "email", "badge_type", "groups"],
        [
            ["John Doe", "john@example.com", "attendee", "VIP,Speakers"],
            ["Jane Smith", "jane@example.com", "vip", "Sponsors"],
        ],
    )


TEMPLATES: dict[EntityKind, Callable[[], str]] = {
    EntityKind.SPEAKERS: speaker_template,
    EntityKind.SESSIONS: session_template,
    EntityKind.EXHIBITORS: exhibitor_template,
    EntityKind.SPONSORS: sponsor_template,
    EntityKind.GROUPS: group_template,
    EntityKind.ATTENDEES: attendee_template,
}


def generate_template(kind: EntityKind | str) -> str:
    """Return the example CSV for *kind*; raise ``ValueError`` for an unknown kind."""
    return TEMPLATES[EntityKind(kind)]()
