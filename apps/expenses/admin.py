from django.contrib import admin
from .models import DieselExpense


@admin.register(DieselExpense)
class DieselExpenseAdmin(admin.ModelAdmin):
    list_display = ['date', 'amount', 'updated_at']
    date_hierarchy = 'date'
    readonly_fields = ['created_at', 'updated_at']
