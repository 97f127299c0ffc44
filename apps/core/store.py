"""
Record Store Client
===================

Every app reaches the relational store through the helpers in this module
instead of catching ORM errors on its own. The helpers cover the query
contract the rest of the project relies on:

    - ``store_call``: translate ``DatabaseError`` into ``StoreError`` or
      ``SchemaMissingError`` (HTTP 503), logging the failure.
    - ``in_range`` / ``count_in_range`` / ``delete_in_range``: inclusive
      date-range filter, count-only query and scoped bulk delete.
    - ``subscribe``: per-table change notifications (insert / update /
      delete) built on Django model signals, returning an unsubscribe handle.
    - ``coerce_amount``: Decimal coercion used by every aggregate.

Example:
    Counting and deleting a month of trips::

        from apps.core.store import count_in_range, delete_in_range

        with store_call('count trips'):
            n = count_in_range(Trip, date(2024, 1, 1), date(2024, 1, 31))

    Reacting to changes::

        unsubscribe = subscribe(Trip, lambda event: print(event.event))
        ...
        unsubscribe()
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from itertools import count as _counter

from django.db import DatabaseError
from django.db.models.signals import post_delete, post_save

from .exceptions import StoreError, SchemaMissingError

logger = logging.getLogger(__name__)

INSERT = 'insert'
UPDATE = 'update'
DELETE = 'delete'
ALL_EVENTS = (INSERT, UPDATE, DELETE)

# Message fragments / codes that mean "the table is not there" on the
# backends we run against (SQLite, PostgreSQL, PostgREST-style gateways).
SCHEMA_MISSING_PATTERNS = (
    'no such table',
    'does not exist',
    'could not find the table',
)
SCHEMA_MISSING_CODES = ('42P01', 'PGRST205')

_subscription_ids = _counter(1)


def is_schema_missing(exc):
    """Return True if ``exc`` says a table (relation) is missing."""
    code = getattr(exc, 'pgcode', None) or getattr(exc, 'code', None)
    cause = exc.__cause__
    if code is None and cause is not None:
        code = getattr(cause, 'pgcode', None) or getattr(cause, 'sqlstate', None)
    if code in SCHEMA_MISSING_CODES:
        return True
    message = str(exc).lower()
    return any(pattern in message for pattern in SCHEMA_MISSING_PATTERNS)


@contextmanager
def store_call(action):
    """
    Run a block of store queries, translating database failures.

    Args:
        action: Short description used in the log line and error detail,
            e.g. ``'fetch trips'``.

    Raises:
        SchemaMissingError: The store reports a missing table.
        StoreError: Any other ``DatabaseError``.
    """
    try:
        yield
    except DatabaseError as exc:
        if is_schema_missing(exc):
            logger.error('Schema missing during %s: %s', action, exc)
            raise SchemaMissingError() from exc
        logger.error('Store error during %s: %s', action, exc)
        raise StoreError(f'Error during {action}: {exc}') from exc


def coerce_amount(value):
    """Return ``value`` as a Decimal; missing or unparseable becomes zero."""
    if value is None or value == '':
        return Decimal('0')
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal('0')
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return Decimal('0')
    return amount if amount.is_finite() else Decimal('0')


def in_range(queryset, start, end, field='date'):
    """Filter ``queryset`` to ``start <= field <= end`` (both inclusive)."""
    return queryset.filter(**{f'{field}__gte': start, f'{field}__lte': end})


def count_in_range(model, start, end, field='date'):
    """Count rows of ``model`` in the interval without fetching them."""
    return in_range(model.objects.all(), start, end, field).count()


def delete_in_range(model, start, end, field='date'):
    """
    Delete every row of ``model`` in the interval.

    Returns:
        int: Number of ``model`` rows removed (cascaded rows of other
        models are not counted).
    """
    _, per_model = in_range(model.objects.all(), start, end, field).delete()
    return per_model.get(model._meta.label, 0)


@dataclass(frozen=True)
class ChangeEvent:
    """One change notification delivered to a subscriber."""
    table: str
    event: str
    pk: object


def subscribe(model, callback, events=ALL_EVENTS):
    """
    Subscribe ``callback`` to changes of ``model``'s table.

    Notifications are delivered synchronously on the thread that performed
    the write, once per saved or deleted row. Writes that bypass model
    signals (``QuerySet.update()``, raw SQL) are not observed.

    Args:
        model: Django model class whose table is watched.
        callback: Callable receiving a :class:`ChangeEvent`.
        events: Iterable subset of ``ALL_EVENTS``.

    Returns:
        Callable with no arguments that removes the subscription.
    """
    events = frozenset(events)
    unknown = events - set(ALL_EVENTS)
    if unknown:
        raise ValueError(f'Unknown change events: {sorted(unknown)}')

    table = model._meta.db_table
    uid = f'store-subscription-{next(_subscription_ids)}'

    def on_save(sender, instance, created, **kwargs):
        event = INSERT if created else UPDATE
        if event in events:
            callback(ChangeEvent(table=table, event=event, pk=instance.pk))

    def on_delete(sender, instance, **kwargs):
        callback(ChangeEvent(table=table, event=DELETE, pk=instance.pk))

    if events & {INSERT, UPDATE}:
        post_save.connect(on_save, sender=model, weak=False, dispatch_uid=uid)
    if DELETE in events:
        post_delete.connect(on_delete, sender=model, weak=False, dispatch_uid=uid)

    def unsubscribe():
        post_save.disconnect(sender=model, dispatch_uid=uid)
        post_delete.disconnect(sender=model, dispatch_uid=uid)

    return unsubscribe
