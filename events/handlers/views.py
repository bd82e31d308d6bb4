"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.urls import reverse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import DomainError
from events.handlers.errors import error_response
from events.handlers.serializers import EventSerializer, ShowMetricSerializer
from events.services.event_service import EventService
from events.services.metrics_service import MetricsService
from events.stores.django_store import DjangoEventStore, DjangoMetricsStore


def build_event_service() -> EventService:
    return EventService(DjangoEventStore())


def build_metrics_service() -> MetricsService:
    return MetricsService(DjangoMetricsStore())


class EventView(APIView):
    """Shared wiring for the event handlers."""

    service_factory = staticmethod(build_event_service)

    def get_service(self) -> EventService:
        return self.service_factory()


class EventListView(EventView):
    """Handler for GET and POST /forge/events"""

    def get(self, request: Request) -> Response:
        try:
            events = self.get_service().list_events(
                start=request.query_params.get("start"),
                limit=request.query_params.get("max"),
            )
        except DomainError as err:
            return error_response(err)
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event = self.get_service().create_event(serializer.to_domain())
        except DomainError as err:
            return error_response(err)
        location = reverse("event-detail", kwargs={"event_id": event.id.value})
        return Response(
            status=status.HTTP_201_CREATED,
            headers={"Location": request.build_absolute_uri(location)},
        )


class EventDetailView(EventView):
    """Handler for GET, PUT and DELETE /forge/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            event = self.get_service().get_event(event_id)
        except DomainError as err:
            return error_response(err)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            self.get_service().update_event(event_id, serializer.to_domain())
        except DomainError as err:
            return error_response(err)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            self.get_service().delete_event(event_id)
        except DomainError as err:
            return error_response(err)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MetricsView(APIView):
    """Handler for GET /metrics. Read-only; other methods answer 405."""

    service_factory = staticmethod(build_metrics_service)

    def get(self, request: Request) -> Response:
        metrics = self.service_factory().get_metrics()
        return Response(ShowMetricSerializer(metrics, many=True).data)
