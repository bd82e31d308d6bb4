"""Serializers between the JSON wire format and domain models.

Field names on the wire are camelCase; domain attributes are snake_case.
"""

from rest_framework import serializers

from events.domain import CategoryInput, EventInput, MediaItemInput
from events.models import MediaItem as MediaItemRow

# Upper bound of the PositiveIntegerField holding the event version.
MAX_VERSION = 2**31 - 1
# Upper bound of the BigAutoField primary keys.
MAX_ID = 2**63 - 1


class MediaItemSerializer(serializers.Serializer):
    """Nested media item: an ``id`` references an existing row, otherwise ``url`` is required."""

    id = serializers.IntegerField(required=False, min_value=1, max_value=MAX_ID)
    mediaType = serializers.ChoiceField(
        source="media_type",
        choices=MediaItemRow.MediaType.choices,
        required=False,
    )
    url = serializers.URLField(required=False, max_length=500)

    def validate(self, attrs):
        if attrs.get("id") is None and not attrs.get("url"):
            raise serializers.ValidationError("Either id or url is required")
        return attrs

    def to_domain(self, attrs) -> MediaItemInput:
        return MediaItemInput(
            id=attrs.get("id"),
            media_type=attrs.get("media_type"),
            url=attrs.get("url"),
        )


class CategorySerializer(serializers.Serializer):
    id = serializers.IntegerField(required=False, min_value=1, max_value=MAX_ID)
    description = serializers.CharField(required=False, max_length=255)

    def validate(self, attrs):
        if attrs.get("id") is None and not attrs.get("description"):
            raise serializers.ValidationError("Either id or description is required")
        return attrs

    def to_domain(self, attrs) -> CategoryInput:
        return CategoryInput(id=attrs.get("id"), description=attrs.get("description"))


class EventSerializer(serializers.Serializer):
    """Serializer for the Event domain model and its incoming representation."""

    id = serializers.IntegerField(source="id.value", read_only=True)
    name = serializers.CharField(min_length=5, max_length=50, trim_whitespace=False)
    description = serializers.CharField(min_length=20, max_length=1000, trim_whitespace=False)
    mediaItem = MediaItemSerializer(source="media_item", required=False, allow_null=True)
    category = CategorySerializer(required=False, allow_null=True)
    version = serializers.IntegerField(
        required=False, allow_null=True, min_value=1, max_value=MAX_VERSION
    )

    def to_domain(self) -> EventInput:
        """Build an EventInput from validated data. Call after is_valid()."""
        attrs = self.validated_data
        media_item = attrs.get("media_item")
        category = attrs.get("category")
        return EventInput(
            name=attrs["name"],
            description=attrs["description"],
            media_item=MediaItemSerializer().to_domain(media_item) if media_item else None,
            category=CategorySerializer().to_domain(category) if category else None,
            version=attrs.get("version"),
        )


class PerformanceMetricSerializer(serializers.Serializer):
    date = serializers.DateTimeField()
    occupiedCount = serializers.IntegerField(source="occupied_count")


class ShowMetricSerializer(serializers.Serializer):
    """Serializer for the ShowMetric view model."""

    show = serializers.IntegerField()
    event = serializers.CharField()
    venue = serializers.CharField()
    capacity = serializers.IntegerField()
    performances = PerformanceMetricSerializer(many=True)
