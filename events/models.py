"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class MediaItem(models.Model):
    """Persistence model for media items (images referenced by URL)."""

    class MediaType(models.TextChoices):
        IMAGE = "IMAGE", "Image"

    media_type = models.CharField(
        max_length=16, choices=MediaType.choices, default=MediaType.IMAGE
    )
    url = models.URLField(max_length=500, unique=True)

    def __str__(self) -> str:
        return self.url


class EventCategory(models.Model):
    description = models.CharField(max_length=255, unique=True)

    class Meta:
        verbose_name_plural = "event categories"

    def __str__(self) -> str:
        return self.description


class Event(models.Model):
    """Persistence model for events.

    ``version`` is bumped on every update and compared on write.
    """

    name = models.CharField(max_length=50, unique=True)
    description = models.TextField()
    media_item = models.ForeignKey(
        MediaItem, on_delete=models.SET_NULL, null=True, blank=True, related_name="+"
    )
    category = models.ForeignKey(
        EventCategory,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="events",
    )
    version = models.PositiveIntegerField(default=1)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class Venue(models.Model):
    """Persistence model for venues."""

    name = models.CharField(max_length=255, unique=True)
    address = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    capacity = models.PositiveIntegerField()
    media_item = models.ForeignKey(
        MediaItem, on_delete=models.SET_NULL, null=True, blank=True, related_name="+"
    )

    def __str__(self) -> str:
        return self.name


class Show(models.Model):
    """An event played at a venue."""

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="shows")
    venue = models.ForeignKey(Venue, on_delete=models.CASCADE, related_name="shows")

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["event", "venue"], name="unique_show_event_venue"),
        ]

    def __str__(self) -> str:
        return f"{self.event.name} at {self.venue.name}"


class Performance(models.Model):
    show = models.ForeignKey(Show, on_delete=models.CASCADE, related_name="performances")
    date = models.DateTimeField()

    class Meta:
        ordering = ["date"]
        constraints = [
            models.UniqueConstraint(fields=["show", "date"], name="unique_performance_show_date"),
        ]
        indexes = [
            models.Index(fields=["date"], name="events_perf_date_7c1f0e_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.show} - {self.date}"


class Booking(models.Model):
    """Persistence model for bookings; occupancy is the number of tickets."""

    performance = models.ForeignKey(
        Performance, on_delete=models.CASCADE, related_name="bookings"
    )
    created_on = models.DateTimeField(auto_now_add=True)
    contact_email = models.EmailField()
    cancellation_code = models.CharField(max_length=64, blank=True)

    def __str__(self) -> str:
        return f"Booking {self.pk} for {self.performance}"


class Ticket(models.Model):
    booking = models.ForeignKey(Booking, on_delete=models.CASCADE, related_name="tickets")
    price = models.DecimalField(max_digits=10, decimal_places=2)

    def __str__(self) -> str:
        return f"Ticket {self.pk} - {self.price}"
