from rest_framework import viewsets

from apps.core.mixins import ConfirmedDestroyMixin
from .models import DieselExpense
from .serializers import DieselExpenseSerializer
from .services import create_expense, update_expense, delete_expense


class DieselExpenseViewSet(ConfirmedDestroyMixin, viewsets.ModelViewSet):
    """
    ViewSet for DieselExpense CRUD operations.

    list: All expenses, newest date first
    create: Record a fuel expense
    retrieve: Get a specific expense
    update: Update an expense
    destroy: Delete an expense (requires confirm=true)
    """

    queryset = DieselExpense.objects.order_by('-date', '-created_at')
    serializer_class = DieselExpenseSerializer

    def perform_create(self, serializer):
        serializer.instance = create_expense(**serializer.validated_data)

    def perform_update(self, serializer):
        serializer.instance = update_expense(serializer.instance, **serializer.validated_data)

    def perform_destroy(self, instance):
        delete_expense(instance)
