"""
Serializers for reports app.

Input Serializers:
    ReportQuerySerializer - Report type and period parameters
    DeletionPreviewSerializer - Deletion range and target tables
    DeletionExecuteSerializer - Explicit confirmation flag

Response Serializers:
    SummarySerializer - Summary aggregator snapshot
    ReportSerializer - Generated period report
    DeletionStateSerializer - Pending deletion workflow state
    DeletionOutcomeSerializer - Rows removed by an executed deletion
"""

from django.conf import settings
from rest_framework import serializers

from apps.expenses.serializers import DieselExpenseSerializer
from apps.trips.serializers import TripSerializer
from .exceptions import InvalidReportPeriodError, InvalidDateRangeError
from .services import ReportType, DeletionTarget, DeletionState, resolve_period
from .services.period_deletion import validate_range


# =============================================================================
# Input Serializers
# =============================================================================

class ReportQuerySerializer(serializers.Serializer):
    """
    Validate report query parameters.

    Query Parameters:
        report_type (str): daily, monthly, yearly or range (default daily)
        date (date): Day of a daily report
        month (str): YYYY-MM of a monthly report
        year (int): Year of a yearly report
        start_date (date): First day of a range report
        end_date (date): Last day of a range report

    Note:
        The resolved ReportPeriod is added as ``period``.
    """

    report_type = serializers.ChoiceField(choices=ReportType.choices, default=ReportType.DAILY)
    date = serializers.DateField(required=False)
    month = serializers.RegexField(
        regex=r'^\d{4}-(0[1-9]|1[0-2])$',
        required=False,
        help_text='Month in YYYY-MM format'
    )
    year = serializers.IntegerField(required=False, min_value=1, max_value=9999)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):
        try:
            attrs['period'] = resolve_period(
                attrs['report_type'],
                date=attrs.get('date'),
                month=attrs.get('month'),
                year=attrs.get('year'),
                start_date=attrs.get('start_date'),
                end_date=attrs.get('end_date'),
            )
        except InvalidReportPeriodError as e:
            raise serializers.ValidationError(str(e))
        return attrs


class DeletionPreviewSerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    target = serializers.ChoiceField(choices=DeletionTarget.choices, default=DeletionTarget.TRIPS)

    def validate(self, attrs):
        try:
            validate_range(attrs['start_date'], attrs['end_date'])
        except InvalidDateRangeError as e:
            raise serializers.ValidationError(str(e))
        return attrs


class DeletionExecuteSerializer(serializers.Serializer):
    confirm = serializers.BooleanField(default=False)


# =============================================================================
# Response Serializers
# =============================================================================

class TotalsSerializer(serializers.Serializer):
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_paid = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_pending = serializers.DecimalField(max_digits=14, decimal_places=2)
    trip_count = serializers.IntegerField()


class CurrencyMixin(serializers.Serializer):
    """Adds the configured display currency symbol."""

    currency = serializers.SerializerMethodField()

    def get_currency(self, obj) -> str:
        return settings.CURRENCY_SYMBOL


class SummarySerializer(CurrencyMixin):
    totals = TotalsSerializer(allow_null=True)
    setup_required = serializers.CharField(allow_null=True)
    error = serializers.CharField(allow_null=True)
    refreshed_at = serializers.DateTimeField(allow_null=True)


class ReportSerializer(CurrencyMixin):
    report_type = serializers.CharField()
    label = serializers.CharField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    trips = TripSerializer(many=True)
    diesel_expenses = DieselExpenseSerializer(many=True)
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_paid = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_pending = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_diesel = serializers.DecimalField(max_digits=14, decimal_places=2)
    net_amount = serializers.DecimalField(max_digits=14, decimal_places=2)


class DeletionStateSerializer(serializers.Serializer):
    state = serializers.ChoiceField(choices=DeletionState.choices)
    start_date = serializers.DateField(allow_null=True)
    end_date = serializers.DateField(allow_null=True)
    target = serializers.CharField(allow_null=True)
    counts = serializers.DictField(child=serializers.IntegerField())


class DeletionOutcomeSerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    target = serializers.CharField()
    deleted = serializers.DictField(child=serializers.IntegerField())


class DeletionFailureSerializer(serializers.Serializer):
    error = serializers.CharField()
    failed_table = serializers.CharField()
    deleted = serializers.DictField(child=serializers.IntegerField())


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
