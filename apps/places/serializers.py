from rest_framework import serializers
from .models import Place


# =============================================================================
# Input Serializers
# =============================================================================

class PlaceSuggestQuerySerializer(serializers.Serializer):
    """
    Validate query parameters for place autocomplete.

    Query Parameters:
        q (str): Text typed so far in the trip's place field
    """

    q = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False, default='')


# =============================================================================
# Output Serializers
# =============================================================================

class PlaceSerializer(serializers.ModelSerializer):
    """Main serializer for places."""

    class Meta:
        model = Place
        fields = [
            'id',
            'place_name',
            'default_amount',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_place_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Place name is required.')
        return value


class PlaceSuggestionSerializer(serializers.ModelSerializer):
    """A place offered by autocomplete, with the amount to pre-fill."""

    suggested_amount = serializers.DecimalField(
        source='default_amount', max_digits=10, decimal_places=2, read_only=True
    )

    class Meta:
        model = Place
        fields = ['id', 'place_name', 'suggested_amount']
        read_only_fields = fields
