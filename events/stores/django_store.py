"""Django ORM implementations of the stores."""

from datetime import datetime

from django.db import transaction
from django.db.models import Count, F, Prefetch

from events import models
from events.domain import (
    Capacity,
    CategoryInput,
    Event,
    EventCategory,
    EventId,
    EventInput,
    MediaItem,
    MediaItemInput,
    Page,
    Performance,
    Show,
)
from events.domain.errors import RelatedEntityNotFoundError
from events.stores.interfaces import EventStore, MetricsStore, StaleEventError


def _event_to_domain(row: models.Event) -> Event:
    media_item = None
    if row.media_item is not None:
        media_item = MediaItem(
            id=row.media_item.id,
            media_type=row.media_item.media_type,
            url=row.media_item.url,
        )
    category = None
    if row.category is not None:
        category = EventCategory(id=row.category.id, description=row.category.description)
    return Event(
        id=EventId(row.id),
        name=row.name,
        description=row.description,
        media_item=media_item,
        category=category,
        version=row.version,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def _events(self):
        # Both relations are to-one, so select_related joins them without duplicating rows.
        return models.Event.objects.select_related("media_item", "category").order_by("id")

    def list_events(self, page: Page) -> list[Event]:
        return [_event_to_domain(row) for row in page.apply(self._events())]

    def get_event(self, event_id: EventId) -> Event | None:
        row = self._events().filter(pk=event_id.value).first()
        if row is None:
            return None
        return _event_to_domain(row)

    def create_event(self, data: EventInput) -> Event:
        with transaction.atomic():
            row = models.Event.objects.create(
                name=data.name,
                description=data.description,
                media_item=self._resolve_media_item(data.media_item),
                category=self._resolve_category(data.category),
            )
        return self.get_event(EventId(row.id))

    def update_event(
        self, event_id: EventId, data: EventInput, expected_version: int
    ) -> Event:
        fields = {
            "name": data.name,
            "description": data.description,
            "version": F("version") + 1,
        }
        with transaction.atomic():
            if data.media_item is not None:
                fields["media_item"] = self._resolve_media_item(data.media_item)
            if data.category is not None:
                fields["category"] = self._resolve_category(data.category)
            updated = models.Event.objects.filter(
                pk=event_id.value, version=expected_version
            ).update(**fields)
            if updated == 0:
                # Rolls back any related rows created above.
                raise StaleEventError(event_id, expected_version)
        return self.get_event(event_id)

    def delete_event(self, event_id: EventId) -> bool:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0

    def _resolve_media_item(self, ref: MediaItemInput | None) -> models.MediaItem | None:
        if ref is None:
            return None
        if ref.id is not None:
            try:
                return models.MediaItem.objects.get(pk=ref.id)
            except models.MediaItem.DoesNotExist:
                raise RelatedEntityNotFoundError("media item", ref.id) from None
        return models.MediaItem.objects.create(
            media_type=ref.media_type or models.MediaItem.MediaType.IMAGE,
            url=ref.url,
        )

    def _resolve_category(self, ref: CategoryInput | None) -> models.EventCategory | None:
        if ref is None:
            return None
        if ref.id is not None:
            try:
                return models.EventCategory.objects.get(pk=ref.id)
            except models.EventCategory.DoesNotExist:
                raise RelatedEntityNotFoundError("category", ref.id) from None
        return models.EventCategory.objects.create(description=ref.description)


class DjangoMetricsStore(MetricsStore):
    """Read-only queries over shows, performances and bookings."""

    def list_shows_with_performances_after(self, moment: datetime) -> list[Show]:
        rows = (
            models.Show.objects.filter(performances__date__gt=moment)
            .distinct()
            .select_related("event", "venue")
            .prefetch_related(
                Prefetch("performances", queryset=models.Performance.objects.order_by("date"))
            )
            .order_by("id")
        )
        return [
            Show(
                id=row.id,
                event_name=row.event.name,
                venue_name=row.venue.name,
                capacity=Capacity(row.venue.capacity),
                performances=tuple(
                    Performance(id=p.id, show_id=row.id, date=p.date)
                    for p in row.performances.all()
                ),
            )
            for row in rows
        ]

    def count_tickets_by_performance_after(self, moment: datetime) -> dict[int, int]:
        rows = (
            models.Booking.objects.filter(performance__date__gt=moment)
            .values("performance_id")
            .annotate(occupied=Count("tickets"))
            .order_by()
        )
        return {row["performance_id"]: row["occupied"] for row in rows}
