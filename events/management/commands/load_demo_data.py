from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from events.models import (
    Booking,
    Event,
    EventCategory,
    MediaItem,
    Performance,
    Show,
    Ticket,
    Venue,
)


class Command(BaseCommand):
    help = "Seed a venue, an event and a show with past and upcoming performances"

    def add_arguments(self, parser):
        parser.add_argument(
            "--days-ahead",
            type=int,
            default=7,
            help="How many days from now the first upcoming performance is scheduled",
        )

    def handle(self, *args, **options):
        days_ahead = options["days_ahead"]
        now = timezone.now().replace(minute=0, second=0, microsecond=0)
        with transaction.atomic():
            category, _ = EventCategory.objects.get_or_create(description="Concert")
            poster, _ = MediaItem.objects.get_or_create(
                url="https://example.org/media/rock-concert.jpg",
                defaults={"media_type": MediaItem.MediaType.IMAGE},
            )
            event, _ = Event.objects.get_or_create(
                name="Rock concert of the decade",
                defaults={
                    "description": "Get ready to rock with the best bands of the decade.",
                    "media_item": poster,
                    "category": category,
                },
            )
            venue, _ = Venue.objects.get_or_create(
                name="Roy Thomson Hall",
                defaults={"address": "60 Simcoe Street, Toronto", "capacity": 2000},
            )
            show, _ = Show.objects.get_or_create(event=event, venue=venue)
            if not show.performances.exists():
                dates = [
                    now - timedelta(days=1),
                    now + timedelta(days=days_ahead),
                    now + timedelta(days=days_ahead + 1),
                ]
                performances = [
                    Performance.objects.create(show=show, date=date) for date in dates
                ]
                for seats in (2, 1):
                    booking = Booking.objects.create(
                        performance=performances[1], contact_email="demo@example.org"
                    )
                    Ticket.objects.bulk_create(
                        [Ticket(booking=booking, price=Decimal("219.50")) for _ in range(seats)]
                    )

        self.stdout.write(
            self.style.SUCCESS(
                f"Demo data ready: event {event.id}, show {show.id}, "
                f"{show.performances.count()} performances"
            )
        )
