from django.contrib import admin
from .models import Trip


@admin.register(Trip)
class TripAdmin(admin.ModelAdmin):
    """Admin interface for trips."""

    list_display = ['date', 'customer_name', 'place', 'amount', 'status']
    list_filter = ['status', 'date']
    search_fields = ['customer_name', 'place']
    date_hierarchy = 'date'
    readonly_fields = ['created_at', 'updated_at']
