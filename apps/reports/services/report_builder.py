"""
Period report builder - fetch and total the trips and diesel expenses of
a resolved period.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from apps.core.store import coerce_amount, in_range, store_call
from apps.expenses.models import DieselExpense
from apps.trips.models import Trip
from .summary import row_value, summarize_trips

logger = logging.getLogger(__name__)


@dataclass
class ReportResult:
    """A generated report. Never persisted."""

    start_date: date
    end_date: date
    trips: list = field(default_factory=list)
    diesel_expenses: list = field(default_factory=list)
    total_amount: Decimal = Decimal('0')
    total_paid: Decimal = Decimal('0')
    total_pending: Decimal = Decimal('0')
    total_diesel: Decimal = Decimal('0')
    net_amount: Decimal = Decimal('0')

    def totals(self):
        return {
            'total_amount': self.total_amount,
            'total_paid': self.total_paid,
            'total_pending': self.total_pending,
            'total_diesel': self.total_diesel,
            'net_amount': self.net_amount,
        }


def aggregate_totals(trips, diesel_expenses):
    """
    Report totals over trip and diesel rows.

    ``net_amount`` is ``total_amount - total_diesel``; unpaid trips are
    included in the net.

    Returns:
        dict: total_amount, total_paid, total_pending, total_diesel, net_amount
    """
    trip_totals = summarize_trips(trips)
    total_diesel = sum(
        (coerce_amount(row_value(row, 'amount')) for row in diesel_expenses),
        Decimal('0'),
    )
    return {
        'total_amount': trip_totals['total_amount'],
        'total_paid': trip_totals['total_paid'],
        'total_pending': trip_totals['total_pending'],
        'total_diesel': total_diesel,
        'net_amount': trip_totals['total_amount'] - total_diesel,
    }


def generate_report(period):
    """
    Build the report for ``period``.

    Trips are ordered by date ascending; diesel expenses likewise. Either
    query failing raises ``StoreError`` and no partial result is returned.
    """
    with store_call('fetch trips'):
        trips = list(in_range(Trip.objects.all(), period.start, period.end)
                     .order_by('date', 'created_at'))
    with store_call('fetch diesel expenses'):
        diesel_expenses = list(in_range(DieselExpense.objects.all(), period.start, period.end)
                               .order_by('date', 'created_at'))

    result = ReportResult(
        start_date=period.start,
        end_date=period.end,
        trips=trips,
        diesel_expenses=diesel_expenses,
        **aggregate_totals(trips, diesel_expenses),
    )
    logger.info(
        'Generated %s report %s..%s: %d trips, %d diesel expenses',
        period.report_type, period.start, period.end,
        len(trips), len(diesel_expenses),
    )
    return result
