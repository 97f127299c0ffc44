import pytest
from datetime import date
from decimal import Decimal
from apps.trips.models import Trip, TripStatus


@pytest.fixture
def paid_trip(db):
    """A settled trip on 2024-01-05."""
    return Trip.objects.create(
        date=date(2024, 1, 5),
        customer_name='Ravi Kumar',
        place='Airport',
        amount=Decimal('500.00'),
        status=TripStatus.PAID,
    )


@pytest.fixture
def unpaid_trip(db):
    """An open trip on 2024-01-10."""
    return Trip.objects.create(
        date=date(2024, 1, 10),
        customer_name='Meena',
        place='Air Cargo',
        amount=Decimal('300.00'),
        status=TripStatus.UNPAID,
    )
