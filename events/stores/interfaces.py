"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from events.domain import Event, EventId, EventInput, Page, Show


class StaleEventError(Exception):
    """Raised by a store when a compare-and-swap on the event version fails."""

    def __init__(self, event_id: EventId, expected_version: int) -> None:
        super().__init__(f"Event {event_id} is no longer at version {expected_version}")
        self.event_id = event_id
        self.expected_version = expected_version


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self, page: Page) -> list[Event]:
        """Return events ordered by id ascending, windowed by page."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event with its media item and category, or None if not found."""
        ...

    @abstractmethod
    def create_event(self, data: EventInput) -> Event:
        """Persist a new event at version 1 and return it with its assigned id.

        Raises:
            RelatedEntityNotFoundError: If a nested reference names an unknown id.
        """
        ...

    @abstractmethod
    def update_event(
        self, event_id: EventId, data: EventInput, expected_version: int
    ) -> Event:
        """Overwrite an event if it is still at expected_version.

        Raises:
            StaleEventError: If the stored version differs or the row is gone.
            RelatedEntityNotFoundError: If a nested reference names an unknown id.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event. Return False if it did not exist."""
        ...


class MetricsStore(ABC):
    """Interface for the read-only queries behind show metrics."""

    @abstractmethod
    def list_shows_with_performances_after(self, moment: datetime) -> list[Show]:
        """Return shows having at least one performance strictly after moment.

        Each show carries all of its performances ordered by date.
        """
        ...

    @abstractmethod
    def count_tickets_by_performance_after(self, moment: datetime) -> dict[int, int]:
        """Map performance id to booked ticket count, for performances after moment."""
        ...
