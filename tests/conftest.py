"""
Shared pytest fixtures.
"""

import os
import tempfile

# Keep the package's data directory and backend choice away from the real user.
os.environ["LENS_DATA_DIR"] = tempfile.mkdtemp(prefix="lens-tracker-tests-")
os.environ["LENS_STORAGE_BACKEND"] = "local"

import pytest  # noqa: E402

from lens_tracker.services import CalendarReminderSync, LensTracker, ReplacementStateStore  # noqa: E402
from tests.fake_calendar import FakeCalendar, FakePropertyStore  # noqa: E402

TEST_TIMEZONE = "Asia/Tokyo"


@pytest.fixture
def property_store():
    return FakePropertyStore()


@pytest.fixture
def calendar():
    return FakeCalendar()


@pytest.fixture
def state_store(property_store):
    return ReplacementStateStore(property_store, timezone=TEST_TIMEZONE)


@pytest.fixture
def reminders(calendar, state_store):
    return CalendarReminderSync(calendar=calendar, state=state_store)


@pytest.fixture
def tracker(state_store, reminders):
    return LensTracker(store=state_store, reminders=reminders, user_key="test-user")
