from rest_framework import serializers
from rest_framework.fields import empty
from rest_framework.utils import html

from routing.coordinates import all_valid_coordinates, is_valid_coordinate

REQUIRED_CODES = {"required", "blank", "null", "empty"}

# field names as they appear in error messages, callers match on these
FIELD_LABELS = {"src": "Src", "dst": "Dst"}


class FirstValueCharField(serializers.CharField):
    """CharField that takes the first of repeated query params (?src=a&src=b -> a)."""
    def get_value(self, dictionary):
        if html.is_html_input(dictionary):
            values = dictionary.getlist(self.field_name)
            return values[0] if values else empty
        return super().get_value(dictionary)


class RouteQuerySerializer(serializers.Serializer):
    """
    Query string of GET /routes: ?src=<lat,lng>&dst=<lat,lng>&dst=...
    Field order matters, the first failing field is the one reported.
    """
    src = FirstValueCharField(trim_whitespace=False)
    # blanks are let through so "dst=" is reported as malformed, not missing
    dst = serializers.ListField(child=serializers.CharField(allow_blank=True, trim_whitespace=False))

    def validate_src(self, value):
        if not is_valid_coordinate(value):
            raise serializers.ValidationError("not a valid latitude and longitude", code="latlng")
        return value

    def validate_dst(self, value):
        if not all_valid_coordinates(value):
            raise serializers.ValidationError("not a valid latitude and longitude", code="latlng")
        return value


def first_error_message(errors) -> str:
    """
    Collapse serializer.errors into the single message the API returns.
    Only the first field counts, however many are invalid.
    """
    for field, details in errors.items():
        label = FIELD_LABELS.get(field, field)
        # ListField child errors come back as {index: [detail, ...]}
        while isinstance(details, dict):
            details = next(iter(details.values()))
        code = getattr(details[0], "code", None) if details else None

        if code in REQUIRED_CODES:
            return f"{label} is a required field"
        if code == "latlng":
            return f"{label} is not a valid latitude and longitude"
        return f"{label} is not valid"

    return "Unknown error"


class RouteResultSerializer(serializers.Serializer):
    destination = serializers.CharField()
    duration = serializers.FloatField()
    distance = serializers.FloatField()


class RoutesResponseSerializer(serializers.Serializer):
    """Serializes an AggregateOutcome, routes already ranked."""
    source = serializers.CharField()
    routes = RouteResultSerializer(many=True, source="results")
