from rest_framework import serializers
from .models import Trip


class TripSerializer(serializers.ModelSerializer):
    """Main serializer for trips."""

    class Meta:
        model = Trip
        fields = [
            'id',
            'date',
            'customer_name',
            'place',
            'amount',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_customer_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Customer name is required.')
        return value

    def validate_place(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Place is required.')
        return value
