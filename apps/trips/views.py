from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.mixins import ConfirmedDestroyMixin
from .models import Trip
from .serializers import TripSerializer
from .services import create_trip, update_trip, delete_trip, toggle_trip_status


class TripViewSet(ConfirmedDestroyMixin, viewsets.ModelViewSet):
    """
    ViewSet for Trip CRUD operations.

    list: All trips, newest date first
    create: Record a trip
    retrieve: Get a specific trip
    update: Update a trip
    destroy: Delete a trip (requires confirm=true)
    toggle_status: Flip paid/unpaid
    """

    queryset = Trip.objects.order_by('-date', '-created_at')
    serializer_class = TripSerializer

    def perform_create(self, serializer):
        serializer.instance = create_trip(**serializer.validated_data)

    def perform_update(self, serializer):
        serializer.instance = update_trip(serializer.instance, **serializer.validated_data)

    def perform_destroy(self, instance):
        delete_trip(instance)

    @extend_schema(
        request=None,
        responses={200: TripSerializer},
        description="Flip the trip between paid and unpaid.",
        tags=['trips'],
    )
    @action(detail=True, methods=['post'])
    def toggle_status(self, request, pk=None):
        """
        Toggle payment status.

        POST /api/trips/{id}/toggle_status/
        """
        trip = toggle_trip_status(self.get_object())
        return Response(TripSerializer(trip).data)
