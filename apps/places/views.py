from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.core.mixins import ConfirmedDestroyMixin
from .models import Place
from .serializers import (
    PlaceSerializer,
    PlaceSuggestionSerializer,
    PlaceSuggestQuerySerializer,
)
from .services import (
    create_place,
    update_place,
    delete_place,
    list_places,
    suggest_places,
)


class PlaceViewSet(ConfirmedDestroyMixin, viewsets.ModelViewSet):
    """
    ViewSet for Place CRUD operations.

    list: All places ordered by name
    create: Add a place with its default fare
    retrieve: Get a specific place
    update: Update a place
    destroy: Delete a place (requires confirm=true)
    suggest: Autocomplete places for the trip form
    """

    queryset = Place.objects.order_by('place_name')
    serializer_class = PlaceSerializer

    def perform_create(self, serializer):
        serializer.instance = create_place(**serializer.validated_data)

    def perform_update(self, serializer):
        serializer.instance = update_place(serializer.instance, **serializer.validated_data)

    def perform_destroy(self, instance):
        delete_place(instance)

    @extend_schema(
        parameters=[
            OpenApiParameter('q', OpenApiTypes.STR, description='Text typed so far (case-insensitive substring match)'),
        ],
        responses={200: PlaceSuggestionSerializer(many=True)},
        description="Places whose name contains q; each carries the amount to pre-fill on the trip.",
        tags=['places'],
    )
    @action(detail=False, methods=['get'])
    def suggest(self, request):
        """
        Autocomplete places.

        GET /api/places/suggest/?q=air
        """
        query_serializer = PlaceSuggestQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        matches = suggest_places(list_places(), query_serializer.validated_data['q'])
        return Response(PlaceSuggestionSerializer(matches, many=True).data)
