"""
Place Services Module
=====================

CRUD for frequent destinations and the trip-form autocomplete.

Functions:
    list_places: All places ordered by name.
    create_place / update_place / delete_place: Mutations returning the
        row as confirmed by the store.
    suggest_places: Pure case-insensitive substring filter.

Example:
    Autocomplete while typing a trip destination::

        >>> [p.place_name for p in suggest_places(places, 'air')]
        ['Air Cargo', 'Airport']
"""

import logging
from decimal import Decimal

from apps.core.store import store_call
from .models import Place

logger = logging.getLogger(__name__)


def list_places():
    """Return every place ordered by name."""
    with store_call('fetch places'):
        return list(Place.objects.order_by('place_name'))


def create_place(*, place_name: str, default_amount: Decimal) -> Place:
    """Insert a place and return the stored row."""
    with store_call('create place'):
        place = Place.objects.create(
            place_name=place_name,
            default_amount=default_amount,
        )
        place.refresh_from_db()
    logger.info('Created place %s (%s)', place.pk, place.place_name)
    return place


def update_place(place: Place, **changes) -> Place:
    """Apply ``changes`` to ``place`` and return the stored row."""
    for field, value in changes.items():
        setattr(place, field, value)
    with store_call('update place'):
        place.save()
        place.refresh_from_db()
    return place


def delete_place(place: Place) -> None:
    place_id = place.pk
    with store_call('delete place'):
        place.delete()
    logger.info('Deleted place %s', place_id)


def suggest_places(places, query):
    """
    Filter ``places`` whose name contains ``query``, ignoring case.

    Args:
        places: Iterable of objects with a ``place_name`` attribute.
        query: Text typed so far. Blank or whitespace-only text yields no
            suggestions.

    Returns:
        list: Matching places, in the input order.
    """
    needle = (query or '').strip().casefold()
    if not needle:
        return []
    return [p for p in places if needle in p.place_name.casefold()]
