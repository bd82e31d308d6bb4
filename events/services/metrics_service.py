"""Read-only metrics for shows with upcoming performances."""

from datetime import datetime

from django.utils import timezone

from events.domain import PerformanceMetric, Show, ShowMetric
from events.stores.interfaces import MetricsStore


class MetricsService:
    """Computes occupancy per performance for every show still to be played.

    Nothing is cached: each call reads the current store state.
    """

    def __init__(self, store: MetricsStore) -> None:
        self._store = store

    def get_metrics(self, now: datetime | None = None) -> list[ShowMetric]:
        moment = now or timezone.now()
        shows = self._store.list_shows_with_performances_after(moment)
        occupied = self._store.count_tickets_by_performance_after(moment)
        return [self._to_metric(show, occupied) for show in shows]

    @staticmethod
    def _to_metric(show: Show, occupied: dict[int, int]) -> ShowMetric:
        return ShowMetric(
            show=show.id,
            event=show.event_name,
            venue=show.venue_name,
            capacity=show.capacity.value,
            performances=tuple(
                PerformanceMetric(date=p.date, occupied_count=occupied.get(p.id, 0))
                for p in show.performances
            ),
        )
