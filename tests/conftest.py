"""Pytest configuration and shared fixtures."""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events import models


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def now():
    return timezone.now()


@pytest.fixture
def make_event():
    """Create persisted events; names are made unique by a counter."""
    counter = iter(range(1, 10_000))

    def _make(**overrides) -> models.Event:
        n = next(counter)
        fields = {
            "name": f"Event number {n}",
            "description": f"A description long enough for event {n}.",
        }
        fields.update(overrides)
        return models.Event.objects.create(**fields)

    return _make


@pytest.fixture
def make_show(make_event):
    """Create a show at a new venue with performances at the given dates."""
    counter = iter(range(1, 10_000))

    def _make(dates, capacity=100, event=None) -> models.Show:
        n = next(counter)
        venue = models.Venue.objects.create(name=f"Venue {n}", capacity=capacity)
        show = models.Show.objects.create(event=event or make_event(), venue=venue)
        for date in dates:
            models.Performance.objects.create(show=show, date=date)
        return show

    return _make


@pytest.fixture
def book():
    """Book a number of tickets for a performance in a single booking."""

    def _book(performance: models.Performance, seats: int) -> models.Booking:
        booking = models.Booking.objects.create(
            performance=performance, contact_email="guest@example.org"
        )
        for _ in range(seats):
            models.Ticket.objects.create(booking=booking, price="10.00")
        return booking

    return _book


@pytest.fixture
def in_days(now):
    def _in_days(days: float):
        return now + timedelta(days=days)

    return _in_days
