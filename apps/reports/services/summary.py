"""
Summary Aggregator
==================

Keeps the running paid / pending totals over every trip. The totals are a
full re-read of the trips table, refreshed on demand and whenever a trip
is inserted, updated or deleted.

Classes:
    SummaryAggregator: One state cell plus its refresh triggers.

Functions:
    summarize_trips: Pure totals over trip rows.
    get_aggregator: The process-wide aggregator started by the app config.

Example:
    Explicit refresh::

        aggregator = SummaryAggregator()
        snapshot = aggregator.refresh()
        print(snapshot['totals']['total_pending'])

Note:
    The state cell is process-local. Concurrent refreshes race and the last
    one to finish wins; a refresh always reads the whole table, so the
    winner is never older than the write that triggered it.
"""

import logging
import threading
from collections.abc import Mapping
from contextlib import contextmanager
from decimal import Decimal

from django.utils import timezone

from apps.core.exceptions import StoreError, SchemaMissingError
from apps.core.store import coerce_amount, store_call, subscribe
from apps.trips.models import Trip, TripStatus

logger = logging.getLogger(__name__)


def row_value(row, field):
    """Read ``field`` from a model instance or a mapping row."""
    if isinstance(row, Mapping):
        return row.get(field)
    return getattr(row, field, None)


def summarize_trips(rows):
    """
    Total trip amounts by status.

    Amounts that are missing or unparseable count as zero. A status that is
    neither paid nor unpaid still counts towards ``total_amount``.

    Returns:
        dict: total_amount, total_paid, total_pending, trip_count
    """
    total_amount = Decimal('0')
    total_paid = Decimal('0')
    total_pending = Decimal('0')
    trip_count = 0

    for row in rows:
        amount = coerce_amount(row_value(row, 'amount'))
        status = row_value(row, 'status')
        total_amount += amount
        if status == TripStatus.PAID:
            total_paid += amount
        elif status == TripStatus.UNPAID:
            total_pending += amount
        trip_count += 1

    return {
        'total_amount': total_amount,
        'total_paid': total_paid,
        'total_pending': total_pending,
        'trip_count': trip_count,
    }


def fetch_trip_amounts():
    """Every trip's amount and status, without the rest of the row."""
    return Trip.objects.values('amount', 'status')


class SummaryAggregator:
    """
    Paid / pending totals over all trips.

    Attributes:
        totals (dict | None): Last successful ``summarize_trips`` result.
        setup_required (str | None): Persistent message set when the trips
            table does not exist; cleared only by a successful refresh.
        error (str | None): Transient store error from the last refresh.
        refreshed_at (datetime | None): When ``totals`` were computed.
    """

    def __init__(self, *, source=fetch_trip_amounts, clock=timezone.now):
        self._source = source
        self._clock = clock
        self._lock = threading.Lock()
        self._unsubscribe = None
        self._suspended = 0
        self.totals = None
        self.setup_required = None
        self.error = None
        self.refreshed_at = None

    @property
    def is_started(self):
        return self._unsubscribe is not None

    def refresh(self):
        """Re-read every trip and recompute the totals; returns a snapshot."""
        try:
            with store_call('fetch summary'):
                totals = summarize_trips(list(self._source()))
        except SchemaMissingError as exc:
            with self._lock:
                self.setup_required = str(exc.detail)
                self.error = None
            return self.snapshot()
        except StoreError as exc:
            with self._lock:
                self.error = str(exc.detail)
            return self.snapshot()

        with self._lock:
            self.totals = totals
            self.setup_required = None
            self.error = None
            self.refreshed_at = self._clock()
        logger.debug('Summary refreshed: %s trips', totals['trip_count'])
        return self.snapshot()

    def snapshot(self):
        """Current state as a plain dict, without touching the store."""
        with self._lock:
            return {
                'totals': dict(self.totals) if self.totals is not None else None,
                'setup_required': self.setup_required,
                'error': self.error,
                'refreshed_at': self.refreshed_at,
            }

    def start(self):
        """Refresh on every trips table change until ``stop()``."""
        if self._unsubscribe is None:
            self._unsubscribe = subscribe(Trip, self._on_change)

    def stop(self):
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @contextmanager
    def suspended(self):
        """
        Ignore change notifications inside the block, then refresh once.

        Bulk deletes emit one notification per row.
        """
        self._suspended += 1
        try:
            yield self
        finally:
            self._suspended -= 1
            if not self._suspended:
                self.refresh()

    def _on_change(self, event):
        if self._suspended:
            return
        logger.debug('Trips %s (id=%s), refreshing summary', event.event, event.pk)
        self.refresh()


_default_aggregator = None


def get_aggregator():
    """The process-wide aggregator, created on first use."""
    global _default_aggregator
    if _default_aggregator is None:
        _default_aggregator = SummaryAggregator()
    return _default_aggregator


def start_default_aggregator():
    aggregator = get_aggregator()
    aggregator.start()
    return aggregator
