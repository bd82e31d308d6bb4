from events.domain.models import (
    CategoryInput,
    Event,
    EventCategory,
    EventInput,
    MediaItem,
    MediaItemInput,
    Performance,
    PerformanceMetric,
    Show,
    ShowMetric,
)
from events.domain.value_objects import Capacity, EventId, Page

__all__ = [
    "Event",
    "EventInput",
    "EventCategory",
    "CategoryInput",
    "MediaItem",
    "MediaItemInput",
    "Show",
    "Performance",
    "ShowMetric",
    "PerformanceMetric",
    "EventId",
    "Capacity",
    "Page",
]
