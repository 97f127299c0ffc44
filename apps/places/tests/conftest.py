import pytest
from decimal import Decimal
from apps.places.models import Place


@pytest.fixture
def airport(db):
    """Create the Airport place."""
    return Place.objects.create(place_name='Airport', default_amount=Decimal('750.00'))


@pytest.fixture
def air_cargo(db):
    """Create the Air Cargo place."""
    return Place.objects.create(place_name='Air Cargo', default_amount=Decimal('900.00'))


@pytest.fixture
def railway_station(db):
    """Create a place that matches neither 'air' nor 'cargo'."""
    return Place.objects.create(place_name='Railway Station', default_amount=Decimal('300.00'))


@pytest.fixture
def all_places(airport, air_cargo, railway_station):
    return [airport, air_cargo, railway_station]
