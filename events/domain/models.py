"""Domain models representing persisted state and derived views.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import Capacity, EventId


@dataclass(frozen=True)
class MediaItem:
    """An image or other media attached to an event or venue."""

    id: int
    media_type: str
    url: str


@dataclass(frozen=True)
class EventCategory:
    id: int
    description: str


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    media_item: MediaItem | None
    category: EventCategory | None
    version: int


@dataclass(frozen=True)
class MediaItemInput:
    """Reference to an existing media item (by id) or fields for a new one."""

    id: int | None = None
    media_type: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class CategoryInput:
    """Reference to an existing category (by id) or fields for a new one."""

    id: int | None = None
    description: str | None = None


@dataclass(frozen=True)
class EventInput:
    """Incoming representation of an Event, before it has an identity.

    ``version`` is the version the client last saw; it is only consulted on
    update.
    """

    name: str
    description: str
    media_item: MediaItemInput | None = None
    category: CategoryInput | None = None
    version: int | None = None


@dataclass(frozen=True)
class Performance:
    id: int
    show_id: int
    date: datetime


@dataclass(frozen=True)
class Show:
    """A show is an event played at a venue; performances are ordered by date."""

    id: int
    event_name: str
    venue_name: str
    capacity: Capacity
    performances: tuple[Performance, ...] = ()


@dataclass(frozen=True)
class PerformanceMetric:
    date: datetime
    occupied_count: int


@dataclass(frozen=True)
class ShowMetric:
    """Computed occupancy summary for a show. Never persisted."""

    show: int
    event: str
    venue: str
    capacity: int
    performances: tuple[PerformanceMetric, ...]
