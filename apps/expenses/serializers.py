from rest_framework import serializers
from .models import DieselExpense


class DieselExpenseSerializer(serializers.ModelSerializer):
    """Main serializer for diesel expenses."""

    class Meta:
        model = DieselExpense
        fields = [
            'id',
            'date',
            'amount',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
