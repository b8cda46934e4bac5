"""Tests for the import_csv and csv_template management commands."""
# ruff: noqa: PLR2004

from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

from events.models import AttendeeGroup, Event, Speaker
from imports.context import ImportContext
from imports.csv_templates import generate_template
from imports.management.commands.import_csv import Command
from imports.types import EntityKind, ImportResult, VerbosityLevel


def run_import(*args: str, **options: object) -> tuple[str, str]:
    """Run import_csv and return what it wrote to stdout and stderr."""
    stdout, stderr = StringIO(), StringIO()
    call_command("import_csv", *args, stdout=stdout, stderr=stderr, **options)
    return stdout.getvalue(), stderr.getvalue()


@pytest.fixture()
def write_csv(tmp_path: Path):
    """Return a helper writing CSV text to a file under *tmp_path*."""

    def _write(text: str, name: str = "import.csv", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path

    return _write


# ---------------------------------------------------------------------------
# import_csv
# ---------------------------------------------------------------------------
@pytest.mark.django_db
class TestImportCsvCommand:
    """Verify the import_csv command end to end."""

    def test_imports_rows_and_reports_count(self, event: Event, write_csv) -> None:
        """Created rows are persisted and counted on stdout."""
        path = write_csv("name,description\nVIP,Guests\nPress,Media\n")

        stdout, stderr = run_import("groups", str(path), event=event.slug)

        assert "Imported 2 groups" in stdout
        assert stderr == ""
        assert set(AttendeeGroup.objects.filter(event=event).values_list("name", flat=True)) == {
            "VIP",
            "Press",
        }

    def test_errors_go_to_stderr(self, event: Event, write_csv) -> None:
        """Row problems are listed on stderr after the count."""
        path = write_csv("name,email\nJane,jane@x.com\n,nobody@x.com\nJane Again,JANE@x.com\n")

        stdout, stderr = run_import("speakers", str(path), event=event.slug)

        assert "Imported 1 speakers" in stdout
        assert "2 row(s) reported problems:" in stdout
        assert "Skipped row: missing name" in stderr
        assert 'Skipped "Jane Again": duplicate email' in stderr

    def test_error_list_is_capped(self, event: Event, write_csv) -> None:
        """Only the first errors are printed, followed by a summary line."""
        rows = "\n".join(f",speaker{i}@x.com" for i in range(7))
        path = write_csv(f"name,email\n{rows}\n")

        _, stderr = run_import("speakers", str(path), event=event.slug, max_errors=3)

        assert stderr.count("Skipped row: missing name") == 3
        assert "...and 4 more errors" in stderr

    @override_settings(CSV_IMPORT_MAX_DISPLAYED_ERRORS=2)
    def test_cap_defaults_to_setting(self, event: Event, write_csv) -> None:
        """Without --max-errors the cap comes from the settings."""
        rows = "\n".join(f",speaker{i}@x.com" for i in range(4))
        path = write_csv(f"name,email\n{rows}\n")

        _, stderr = run_import("speakers", str(path), event=event.slug)

        assert "...and 2 more errors" in stderr

    def test_zero_cap_prints_only_the_summary(self, event: Event, write_csv) -> None:
        """With --max-errors 0 no error line is printed, only the count of hidden ones."""
        rows = "\n".join(f",speaker{i}@x.com" for i in range(3))
        path = write_csv(f"name,email\n{rows}\n")

        _, stderr = run_import("speakers", str(path), event=event.slug, max_errors=0)

        assert "Skipped row" not in stderr
        assert "...and 3 more errors" in stderr

    def test_negative_cap_is_rejected(self, event: Event, write_csv) -> None:
        """A negative --max-errors is a usage error."""
        path = write_csv("name\nVIP\n")
        with pytest.raises(CommandError, match="must be zero or a positive number"):
            run_import("groups", str(path), "--event", event.slug, "--max-errors", "-1")
        assert not AttendeeGroup.objects.filter(event=event).exists()

    def test_finished_run_is_logged(
        self,
        event: Event,
        write_csv,
        captured_logs: list[dict[str, Any]],
    ) -> None:
        """The command logs its outcome under the event slug."""
        path = write_csv("name\nVIP\n")

        stdout, _ = run_import("groups", str(path), event=event.slug)

        assert "Imported 1 groups" in stdout
        (finished,) = [e for e in captured_logs if e["event"] == "csv_command_finished"]
        assert finished["event_slug"] == "derm-2026"
        assert finished["created"] == 1
        assert finished["errors"] == 0

    def test_header_only_file(self, event: Event, write_csv) -> None:
        """A file without data rows reports the structural error."""
        path = write_csv("name,email\n")

        stdout, stderr = run_import("speakers", str(path), event=event.slug)

        assert "Imported 0 speakers" in stdout
        assert "No valid rows found in CSV" in stderr

    def test_byte_order_mark_is_stripped(self, event: Event, write_csv) -> None:
        """Files saved with a UTF-8 BOM import like plain UTF-8."""
        path = write_csv("name,email\nJane Doe,jane@x.com\n", encoding="utf-8-sig")

        run_import("speakers", str(path), event=event.slug)

        assert Speaker.objects.get(event=event).full_name == "Jane Doe"

    def test_verbose_output_lists_created_rows(self, event: Event, write_csv) -> None:
        """Verbosity 2 prints one line per created row."""
        path = write_csv("name\nVIP\n")

        stdout, _ = run_import("groups", str(path), event=event.slug, verbosity=2)

        assert "Created groups: VIP" in stdout

    def test_quiet_output_hides_errors(self, event: Event, write_csv) -> None:
        """Verbosity 0 prints only the created count."""
        path = write_csv("name,color\nVIP,#fff\n,#000\n")

        stdout, stderr = run_import("groups", str(path), event=event.slug, verbosity=0)

        assert "Imported" in stdout
        assert stderr == ""

    def test_unknown_event(self, write_csv) -> None:
        """An unknown event slug is a command error."""
        path = write_csv("name\nVIP\n")
        with pytest.raises(CommandError, match="Event 'nope' does not exist"):
            run_import("groups", str(path), event="nope")

    def test_missing_file(self, event: Event, tmp_path: Path) -> None:
        """An unreadable file is a command error."""
        with pytest.raises(CommandError, match="Could not read CSV file"):
            run_import("groups", str(tmp_path / "missing.csv"), event=event.slug)

    def test_non_utf8_file(self, event: Event, write_csv) -> None:
        """Files that are not UTF-8 are rejected."""
        path = write_csv("name\nCafé\n", encoding="latin-1")
        with pytest.raises(CommandError, match="Could not read CSV file"):
            run_import("groups", str(path), event=event.slug)

    def test_unknown_kind(self, event: Event, write_csv) -> None:
        """Only known entity kinds are accepted."""
        path = write_csv("name\nVIP\n")
        with pytest.raises(CommandError, match="invalid choice"):
            run_import("volunteers", str(path), event=event.slug)

    def test_imports_are_event_scoped(self, event: Event, other_event: Event, write_csv) -> None:
        """Rows land in the selected event only."""
        path = write_csv("name\nVIP\n")

        run_import("groups", str(path), event=other_event.slug)

        assert not AttendeeGroup.objects.filter(event=event).exists()
        assert AttendeeGroup.objects.filter(event=other_event).count() == 1


# ---------------------------------------------------------------------------
# Report output
# ---------------------------------------------------------------------------
class TestReport:
    """Verify the summary printed by the command mixin."""

    def test_zero_created_is_a_warning(self, command: Command) -> None:
        """A run that created nothing still prints its count."""
        ctx = ImportContext(verbosity=VerbosityLevel.NORMAL, log_fn=command._log)  # noqa: SLF001
        command._report(EntityKind.SPONSORS, ImportResult(), ctx)  # noqa: SLF001
        assert "Imported 0 sponsors" in command.stdout.getvalue()  # type: ignore[attr-defined]

    def test_capped_error_lines(self, command: Command) -> None:
        """Errors beyond the cap are summarized in one line."""
        ctx = ImportContext(
            verbosity=VerbosityLevel.NORMAL,
            log_fn=command._log,  # noqa: SLF001
            max_displayed_errors=1,
        )
        result = ImportResult(created=1, errors=["first", "second", "third"])

        command._report(EntityKind.SPEAKERS, result, ctx)  # noqa: SLF001

        stderr = command.stderr.getvalue()  # type: ignore[attr-defined]
        assert "first" in stderr
        assert "second" not in stderr
        assert "...and 2 more errors" in stderr


# ---------------------------------------------------------------------------
# ImportContext
# ---------------------------------------------------------------------------
class TestImportContext:
    """Verify context construction from command options and settings."""

    def test_from_options(self) -> None:
        """Verbosity and the error cap come from the parsed options."""
        ctx = ImportContext.from_options({"verbosity": 2, "max_errors": 10}, log_fn=print)
        assert ctx.verbosity is VerbosityLevel.DETAILED
        assert ctx.max_displayed_errors == 10

    def test_verbosity_is_clamped(self) -> None:
        """Django accepts verbosity 3 at most; higher values map to DEBUG."""
        ctx = ImportContext.from_options({"verbosity": 7}, log_fn=print)
        assert ctx.verbosity is VerbosityLevel.DEBUG

    @override_settings(CSV_IMPORT_DEFAULT_GROUP_COLOR="#000000", CSV_IMPORT_MAX_DISPLAYED_ERRORS=9)
    def test_from_settings(self) -> None:
        """The silent context reads its defaults from settings."""
        ctx = ImportContext.from_settings()
        assert ctx.default_group_color == "#000000"
        assert ctx.max_displayed_errors == 9
        assert ctx.verbosity is VerbosityLevel.MINIMAL

    @override_settings(CSV_IMPORT_MAX_DISPLAYED_ERRORS=9)
    def test_zero_cap_is_kept(self) -> None:
        """A cap of zero is a real value, not a fallback to the setting."""
        ctx = ImportContext.from_options({"verbosity": 1, "max_errors": 0}, log_fn=print)
        assert ctx.max_displayed_errors == 0

    @override_settings(CSV_IMPORT_MAX_DISPLAYED_ERRORS=9)
    def test_missing_cap_uses_setting(self) -> None:
        """Options without a cap fall back to the setting."""
        ctx = ImportContext.from_options({"verbosity": 1, "max_errors": None}, log_fn=print)
        assert ctx.max_displayed_errors == 9


# ---------------------------------------------------------------------------
# csv_template
# ---------------------------------------------------------------------------
class TestCsvTemplateCommand:
    """Verify the csv_template command."""

    def test_prints_to_stdout(self) -> None:
        """Without --output the template is printed."""
        stdout = StringIO()
        call_command("csv_template", "groups", stdout=stdout)
        assert stdout.getvalue().strip() == generate_template(EntityKind.GROUPS)

    def test_writes_file(self, tmp_path: Path) -> None:
        """With --output the template is saved and a confirmation printed."""
        output = tmp_path / "sponsors.csv"
        stdout = StringIO()

        call_command("csv_template", "sponsors", output=output, stdout=stdout)

        assert output.read_text(encoding="utf-8") == generate_template("sponsors") + "\n"
        assert f"Wrote sponsors template to {output}" in stdout.getvalue()

    def test_unwritable_output(self, tmp_path: Path) -> None:
        """Write failures are command errors."""
        with pytest.raises(CommandError, match="Could not write template"):
            call_command("csv_template", "groups", output=tmp_path / "missing" / "groups.csv")
