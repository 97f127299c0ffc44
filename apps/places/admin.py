from django.contrib import admin
from .models import Place


@admin.register(Place)
class PlaceAdmin(admin.ModelAdmin):
    """Admin interface for frequent places."""

    list_display = ['place_name', 'default_amount', 'updated_at']
    search_fields = ['place_name']
    ordering = ['place_name']
    readonly_fields = ['created_at', 'updated_at']
