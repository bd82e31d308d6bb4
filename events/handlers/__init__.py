from events.handlers.views import EventDetailView, EventListView, MetricsView

__all__ = ["EventListView", "EventDetailView", "MetricsView"]
