"""Tests for the load_demo_data management command.

Run with: pytest tests/test_commands.py -v
"""

from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import call_command
from django.utils import timezone

from events import models
from events.services.metrics_service import MetricsService
from events.stores.django_store import DjangoMetricsStore


@pytest.mark.django_db
class TestLoadDemoData:
    def test_seeds_a_show_with_upcoming_bookings(self):
        out = StringIO()

        call_command("load_demo_data", stdout=out)

        assert "Demo data ready" in out.getvalue()
        [metric] = MetricsService(DjangoMetricsStore()).get_metrics()
        assert metric.capacity == 2000
        assert [p.occupied_count for p in metric.performances] == [0, 3, 0]

    def test_running_twice_does_not_duplicate_the_catalog(self, monkeypatch):
        call_command("load_demo_data", stdout=StringIO())
        later = timezone.now() + timedelta(hours=2)
        monkeypatch.setattr(timezone, "now", lambda: later)

        call_command("load_demo_data", stdout=StringIO())

        assert models.Event.objects.count() == 1
        assert models.Show.objects.count() == 1
        assert models.Performance.objects.count() == 3
        assert models.Ticket.objects.count() == 3
