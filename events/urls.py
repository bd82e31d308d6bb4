from django.urls import path

from events.handlers import EventDetailView, EventListView, MetricsView

urlpatterns = [
    path("forge/events", EventListView.as_view(), name="event-list"),
    path("forge/events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("metrics", MetricsView.as_view(), name="metrics"),
]
