"""Unit tests for EventService and MetricsService.

These test error handling and domain error mapping against in-memory stores.
Run with: pytest tests/test_services.py -v
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from events.domain import (
    Capacity,
    Event,
    EventId,
    EventInput,
    Page,
    Performance,
    Show,
)
from events.domain.errors import (
    EventConflictError,
    EventNotFoundError,
    InvalidEventIdError,
    InvalidPageError,
)
from events.services.event_service import EventService
from events.services.metrics_service import MetricsService
from events.stores.interfaces import EventStore, MetricsStore, StaleEventError


class InMemoryEventStore(EventStore):
    def __init__(self) -> None:
        self.rows: dict[int, Event] = {}
        self._next_id = 1

    def list_events(self, page: Page) -> list[Event]:
        return page.apply([self.rows[key] for key in sorted(self.rows)])

    def get_event(self, event_id: EventId) -> Event | None:
        return self.rows.get(event_id.value)

    def create_event(self, data: EventInput) -> Event:
        event = Event(
            id=EventId(self._next_id),
            name=data.name,
            description=data.description,
            media_item=None,
            category=None,
            version=1,
        )
        self.rows[self._next_id] = event
        self._next_id += 1
        return event

    def update_event(self, event_id: EventId, data: EventInput, expected_version: int) -> Event:
        current = self.rows.get(event_id.value)
        if current is None or current.version != expected_version:
            raise StaleEventError(event_id, expected_version)
        updated = replace(
            current, name=data.name, description=data.description, version=current.version + 1
        )
        self.rows[event_id.value] = updated
        return updated

    def delete_event(self, event_id: EventId) -> bool:
        return self.rows.pop(event_id.value, None) is not None


def _input(name="Opening night", version=None) -> EventInput:
    return EventInput(name=name, description="Twenty characters or more.", version=version)


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def service(store) -> EventService:
    return EventService(store)


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidEventIdError):
            service.get_event("not-a-number")

    def test_get_event_not_found_raises_error(self, service):
        with pytest.raises(EventNotFoundError):
            service.get_event("99")

    def test_create_then_get_returns_input(self, service):
        created = service.create_event(_input())
        fetched = service.get_event(str(created.id))
        assert fetched.name == "Opening night"
        assert fetched.version == 1

    def test_list_events_applies_page(self, service):
        for name in ("first", "second", "third"):
            service.create_event(_input(name))
        assert [e.name for e in service.list_events()] == ["first", "second", "third"]
        assert [e.name for e in service.list_events(start="1", limit="1")] == ["second"]

    def test_list_events_invalid_page_raises_error(self, service):
        with pytest.raises(InvalidPageError):
            service.list_events(start="-1")

    def test_delete_missing_event_raises_error(self, service):
        with pytest.raises(EventNotFoundError):
            service.delete_event("5")

    def test_delete_then_get_raises_not_found(self, service):
        created = service.create_event(_input())
        service.delete_event(str(created.id))
        with pytest.raises(EventNotFoundError):
            service.get_event(str(created.id))

    def test_update_bumps_version(self, service):
        created = service.create_event(_input())
        updated = service.update_event(str(created.id), _input("Renamed night"))
        assert updated.version == 2
        assert service.get_event(str(created.id)).name == "Renamed night"

    def test_update_with_stale_version_raises_conflict_with_current(self, service):
        created = service.create_event(_input())
        service.update_event(str(created.id), _input("Second edit", version=1))

        with pytest.raises(EventConflictError) as excinfo:
            service.update_event(str(created.id), _input("Stale edit", version=1))

        assert excinfo.value.current.name == "Second edit"
        assert excinfo.value.current.version == 2
        assert service.get_event(str(created.id)).name == "Second edit"

    def test_update_without_version_conflicts_with_interleaved_write(self):
        class InterleavingStore(InMemoryEventStore):
            def update_event(self, event_id, data, expected_version):
                # Another writer lands between the read and the compare.
                current = self.rows[event_id.value]
                self.rows[event_id.value] = replace(
                    current, name="Other writer", version=current.version + 1
                )
                return super().update_event(event_id, data, expected_version)

        store = InterleavingStore()
        service = EventService(store)
        created = service.create_event(_input())

        with pytest.raises(EventConflictError) as excinfo:
            service.update_event(str(created.id), _input("Late writer"))

        assert excinfo.value.current.name == "Other writer"
        assert excinfo.value.current.version == 2
        assert store.rows[created.id.value].name == "Other writer"

    def test_update_missing_event_creates_new_one(self, service, store):
        created = service.update_event("42", _input("Brand new"))
        assert created.id == EventId(1)
        assert 42 not in store.rows
        assert store.rows[1].name == "Brand new"

    def test_update_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidEventIdError):
            service.update_event("0", _input())

    def test_update_of_row_deleted_midway_raises_not_found(self):
        class VanishingStore(InMemoryEventStore):
            def update_event(self, event_id, data, expected_version):
                self.rows.pop(event_id.value)
                raise StaleEventError(event_id, expected_version)

        vanishing = VanishingStore()
        service = EventService(vanishing)
        created = service.create_event(_input())
        with pytest.raises(EventNotFoundError):
            service.update_event(str(created.id), _input())


NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


class FakeMetricsStore(MetricsStore):
    def __init__(self, shows: list[Show], occupied: dict[int, int]) -> None:
        self.shows = shows
        self.occupied = occupied
        self.moments: list[datetime] = []

    def list_shows_with_performances_after(self, moment: datetime) -> list[Show]:
        self.moments.append(moment)
        return [s for s in self.shows if any(p.date > moment for p in s.performances)]

    def count_tickets_by_performance_after(self, moment: datetime) -> dict[int, int]:
        self.moments.append(moment)
        return dict(self.occupied)


def _show(show_id: int, *performances: Performance) -> Show:
    return Show(
        id=show_id,
        event_name=f"Event {show_id}",
        venue_name="Roy Thomson Hall",
        capacity=Capacity(2000),
        performances=performances,
    )


class TestMetricsService:
    """Tests for MetricsService assembly."""

    def test_missing_counts_are_zero(self):
        p1 = Performance(id=1, show_id=1, date=NOW + timedelta(days=1))
        p2 = Performance(id=2, show_id=1, date=NOW + timedelta(days=2))
        service = MetricsService(FakeMetricsStore([_show(1, p1, p2)], {2: 3}))

        [metric] = service.get_metrics(now=NOW)

        assert metric.show == 1
        assert metric.event == "Event 1"
        assert metric.venue == "Roy Thomson Hall"
        assert metric.capacity == 2000
        assert [(p.date, p.occupied_count) for p in metric.performances] == [
            (p1.date, 0),
            (p2.date, 3),
        ]

    def test_no_upcoming_shows_gives_empty_list(self):
        past = Performance(id=1, show_id=1, date=NOW - timedelta(days=1))
        service = MetricsService(FakeMetricsStore([_show(1, past)], {}))
        assert service.get_metrics(now=NOW) == []

    def test_both_queries_use_the_same_moment(self):
        store = FakeMetricsStore([], {})
        MetricsService(store).get_metrics()
        assert len(store.moments) == 2
        assert store.moments[0] is store.moments[1]

    def test_each_show_is_reported_separately(self):
        p1 = Performance(id=1, show_id=1, date=NOW + timedelta(hours=1))
        p2 = Performance(id=2, show_id=2, date=NOW + timedelta(hours=1))
        service = MetricsService(FakeMetricsStore([_show(1, p1), _show(2, p2)], {1: 5}))
        metrics = service.get_metrics(now=NOW)
        assert [(m.show, m.performances[0].occupied_count) for m in metrics] == [(1, 5), (2, 0)]
