"""
Trip Services Module
====================

Trip mutations and the paid/unpaid toggle. Every mutation returns the row
as re-read from the store, so callers never hold a locally patched copy
that the database has not confirmed.

Example:
    Recording a trip and settling it later::

        trip = create_trip(
            date=date(2024, 1, 5),
            customer_name='Ravi',
            place='Airport',
            amount=Decimal('500.00'),
        )
        trip = toggle_trip_status(trip)   # unpaid -> paid
"""

import logging
from datetime import date as date_type
from decimal import Decimal

from apps.core.store import store_call
from .models import Trip, TripStatus

logger = logging.getLogger(__name__)


def create_trip(
    *,
    date: date_type,
    customer_name: str,
    place: str,
    amount: Decimal,
    status: str = TripStatus.UNPAID
) -> Trip:
    """
    Insert a trip and return the stored row.

    The amount is whatever the operator entered; a place's default fare
    only pre-fills the form and is not enforced here.
    """
    with store_call('create trip'):
        trip = Trip.objects.create(
            date=date,
            customer_name=customer_name,
            place=place,
            amount=amount,
            status=status,
        )
        trip.refresh_from_db()
    logger.info('Created trip %s on %s for %s', trip.pk, trip.date, trip.amount)
    return trip


def update_trip(trip: Trip, **changes) -> Trip:
    """Apply ``changes`` to ``trip`` and return the stored row."""
    for field, value in changes.items():
        setattr(trip, field, value)
    with store_call('update trip'):
        trip.save()
        trip.refresh_from_db()
    return trip


def toggle_trip_status(trip: Trip) -> Trip:
    """Flip paid <-> unpaid; ``updated_at`` moves with the save."""
    new_status = TripStatus.UNPAID if trip.status == TripStatus.PAID else TripStatus.PAID
    return update_trip(trip, status=new_status)


def delete_trip(trip: Trip) -> None:
    trip_id = trip.pk
    with store_call('delete trip'):
        trip.delete()
    logger.info('Deleted trip %s', trip_id)
