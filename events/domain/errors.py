"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum

from events.domain.models import Event


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EVENT_CONFLICT = "EVENT_CONFLICT"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_PAGE = "INVALID_PAGE"
    RELATED_NOT_FOUND = "RELATED_NOT_FOUND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        object.__setattr__(self, "event_id", event_id)


class EventConflictError(DomainError):
    """Raised when an update was based on a stale version of the event.

    Carries the event as currently persisted so callers can show it.
    """

    def __init__(self, current: Event) -> None:
        super().__init__(
            code=ErrorCode.EVENT_CONFLICT,
            message="Event was modified by another request",
        )
        object.__setattr__(self, "current", current)


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidPageError(DomainError):
    """Raised when start/max query parameters are not non-negative integers."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAGE,
            message="start and max must be non-negative integers",
        )


class RelatedEntityNotFoundError(DomainError):
    """Raised when an input references a media item or category that does not exist."""

    def __init__(self, kind: str, related_id: int) -> None:
        super().__init__(
            code=ErrorCode.RELATED_NOT_FOUND,
            message=f"Unknown {kind} id {related_id}",
        )
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "related_id", related_id)
