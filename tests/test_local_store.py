"""
Tests for the JSON-file property store and calendar.
"""

from datetime import date

import pytest

from lens_tracker.data import JsonCalendar, JsonPropertyStore
from lens_tracker.domain import CalendarSyncError


@pytest.fixture
def properties_path(tmp_path):
    return tmp_path / "properties.json"


@pytest.fixture
def calendar_path(tmp_path):
    return tmp_path / "calendar.json"


class TestJsonPropertyStore:
    def test_missing_file_reads_empty(self, properties_path):
        assert JsonPropertyStore(properties_path, "alice").get_properties() == {}

    def test_batch_write_then_read(self, properties_path):
        store = JsonPropertyStore(properties_path, "alice")
        store.set_properties({"A": "1", "B": "2"})
        assert store.get_properties() == {"A": "1", "B": "2"}

    def test_writes_merge_and_overwrite(self, properties_path):
        store = JsonPropertyStore(properties_path, "alice")
        store.set_properties({"A": "1", "B": "2"})
        store.set_properties({"B": "3"})
        assert store.get_properties() == {"A": "1", "B": "3"}

    def test_users_are_isolated(self, properties_path):
        JsonPropertyStore(properties_path, "alice").set_properties({"A": "1"})
        assert JsonPropertyStore(properties_path, "bob").get_properties() == {}

    def test_no_temporary_file_left_behind(self, properties_path):
        JsonPropertyStore(properties_path, "alice").set_properties({"A": "1"})
        assert [path.name for path in properties_path.parent.iterdir()] == ["properties.json"]


class TestJsonCalendar:
    def test_create_get_delete(self, calendar_path):
        calendar = JsonCalendar(calendar_path, "alice")
        event = calendar.create_all_day_event("Contact lens exchange", date(2024, 1, 15), description="hi")

        fetched = calendar.get_event(event.id)
        assert fetched is not None
        assert fetched.day == date(2024, 1, 15)
        assert fetched.all_day is True
        assert fetched.description == "hi"

        assert calendar.delete_event(event.id) is True
        assert calendar.get_event(event.id) is None
        assert calendar.delete_event(event.id) is False

    def test_other_users_events_are_invisible(self, calendar_path):
        event = JsonCalendar(calendar_path, "alice").create_all_day_event("x", date(2024, 1, 15))
        other = JsonCalendar(calendar_path, "bob")
        assert other.get_event(event.id) is None
        assert other.delete_event(event.id) is False

    def test_corrupt_file_raises_calendar_error(self, calendar_path):
        calendar_path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CalendarSyncError):
            JsonCalendar(calendar_path, "alice").get_event("anything")
