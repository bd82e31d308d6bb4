from django.contrib import admin

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


class PerformanceInline(admin.TabularInline):
    model = Performance
    extra = 1


class TicketInline(admin.TabularInline):
    model = Ticket
    extra = 1


@admin.register(MediaItem)
class MediaItemAdmin(admin.ModelAdmin):
    list_display = ["url", "media_type"]


@admin.register(EventCategory)
class EventCategoryAdmin(admin.ModelAdmin):
    search_fields = ["description"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "version"]
    search_fields = ["name"]
    list_filter = ["category"]
    readonly_fields = ["version"]


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    list_display = ["name", "address", "capacity"]
    search_fields = ["name"]


@admin.register(Show)
class ShowAdmin(admin.ModelAdmin):
    list_display = ["event", "venue"]
    list_filter = ["venue"]
    inlines = [PerformanceInline]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["performance", "contact_email", "created_on"]
    list_filter = ["performance__show__event"]
    inlines = [TicketInline]
