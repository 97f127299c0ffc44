"""
Reports test fixtures.

January 2024 ledger used across the reports tests:
    2024-01-05  paid trip     500.00
    2024-01-07  diesel        200.00
    2024-01-10  unpaid trip   300.00
Plus rows on the days either side of the month to check range boundaries.
"""

import pytest
from datetime import date
from decimal import Decimal

from apps.expenses.models import DieselExpense
from apps.reports.services import SummaryAggregator
from apps.trips.models import Trip, TripStatus


@pytest.fixture
def january_ledger(db):
    return {
        'paid': Trip.objects.create(
            date=date(2024, 1, 5),
            customer_name='Ravi',
            place='Airport',
            amount=Decimal('500.00'),
            status=TripStatus.PAID,
        ),
        'unpaid': Trip.objects.create(
            date=date(2024, 1, 10),
            customer_name='Meena',
            place='Railway Station',
            amount=Decimal('300.00'),
            status=TripStatus.UNPAID,
        ),
        'diesel': DieselExpense.objects.create(
            date=date(2024, 1, 7),
            amount=Decimal('200.00'),
        ),
    }


@pytest.fixture
def boundary_rows(db):
    """Rows on the first and last day of January and just outside it."""
    return {
        'first_day': Trip.objects.create(
            date=date(2024, 1, 1), customer_name='A', place='X', amount=Decimal('10.00'),
        ),
        'last_day': Trip.objects.create(
            date=date(2024, 1, 31), customer_name='B', place='X', amount=Decimal('20.00'),
        ),
        'before': Trip.objects.create(
            date=date(2023, 12, 31), customer_name='C', place='X', amount=Decimal('40.00'),
        ),
        'after': Trip.objects.create(
            date=date(2024, 2, 1), customer_name='D', place='X', amount=Decimal('80.00'),
        ),
        'diesel_last_day': DieselExpense.objects.create(
            date=date(2024, 1, 31), amount=Decimal('50.00'),
        ),
        'diesel_after': DieselExpense.objects.create(
            date=date(2024, 2, 1), amount=Decimal('60.00'),
        ),
    }


@pytest.fixture
def aggregator():
    """A private aggregator, so tests never depend on the process-wide one."""
    instance = SummaryAggregator()
    yield instance
    instance.stop()
