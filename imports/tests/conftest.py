"""Shared test fixtures for the imports app."""

from collections.abc import Iterator
from io import StringIO
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs
from model_bakery import baker
from pytest_mock import MockerFixture

from events.models import Event
from imports import pipeline, resolver
from imports.context import ImportContext
from imports.management.commands import import_csv
from imports.management.commands.import_csv import Command
from imports.types import VerbosityLevel


@pytest.fixture()
def event() -> Event:
    """Create the event every imported row belongs to."""
    return baker.make(Event, name="Dermatology Summit 2026", slug="derm-2026", year=2026)


@pytest.fixture()
def other_event() -> Event:
    """Create a second event to check that imports stay event-scoped."""
    return baker.make(Event, name="Skin Science Forum 2026", slug="skin-2026", year=2026)


@pytest.fixture()
def ctx() -> ImportContext:
    """Return a silent import context."""
    return ImportContext(verbosity=VerbosityLevel.MINIMAL)


@pytest.fixture()
def command() -> Command:
    """Create an import_csv Command instance with mocked stdout/stderr."""
    cmd = Command()
    cmd.stdout = StringIO()  # type: ignore[assignment]
    cmd.stderr = StringIO()  # type: ignore[assignment]
    return cmd


@pytest.fixture()
def captured_logs(mocker: MockerFixture) -> Iterator[list[dict[str, Any]]]:
    """
    Capture the structlog events of the import modules.

    Module loggers are swapped for fresh ones because loggers cached on first use keep the
    processor chain they were built with.
    """
    with capture_logs() as logs:
        for module in (pipeline, resolver, import_csv):
            mocker.patch.object(module, "logger", structlog.get_logger(module.__name__))
        yield logs
