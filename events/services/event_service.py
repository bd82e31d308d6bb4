"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from events.domain import Event, EventId, EventInput, Page
from events.domain.errors import (
    EventConflictError,
    EventNotFoundError,
    InvalidEventIdError,
    InvalidPageError,
)
from events.stores.interfaces import EventStore, StaleEventError

logger = logging.getLogger(__name__)


class EventService:
    """Service for event CRUD operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self, start: str | None = None, limit: str | None = None) -> list[Event]:
        """Return events ordered by id, optionally windowed by start/limit.

        Raises:
            InvalidPageError: If start or limit is not a non-negative integer.
        """
        try:
            page = Page.from_params(start, limit)
        except ValueError:
            raise InvalidPageError() from None
        return self._store.list_events(page)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(self._parse_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, data: EventInput) -> Event:
        event = self._store.create_event(data)
        logger.info("Created event %s", event.id)
        return event

    def update_event(self, event_id: str, data: EventInput) -> Event:
        """Overwrite an event, guarded by its version.

        The version compared is the one carried by ``data`` when present,
        otherwise the version read at the start of this call. An unknown id
        creates a new event from ``data`` with a store-assigned id.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventConflictError: If the event changed since the compared version.
        """
        parsed = self._parse_id(event_id)
        existing = self._store.get_event(parsed)
        if existing is None:
            created = self._store.create_event(data)
            logger.warning(
                "Update of missing event %s created event %s instead", parsed, created.id
            )
            return created

        expected = data.version if data.version is not None else existing.version
        try:
            updated = self._store.update_event(parsed, data, expected)
        except StaleEventError:
            current = self._store.get_event(parsed)
            if current is None:
                raise EventNotFoundError(event_id) from None
            logger.warning(
                "Rejected stale update of event %s: expected version %s, found %s",
                parsed,
                expected,
                current.version,
            )
            raise EventConflictError(current) from None
        logger.info("Updated event %s to version %s", parsed, updated.version)
        return updated

    def delete_event(self, event_id: str) -> None:
        """Delete an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        if not self._store.delete_event(self._parse_id(event_id)):
            raise EventNotFoundError(event_id)
        logger.info("Deleted event %s", event_id)

    @staticmethod
    def _parse_id(event_id: str) -> EventId:
        try:
            return EventId.from_string(event_id)
        except ValueError:
            raise InvalidEventIdError() from None
