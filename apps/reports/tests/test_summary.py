import pytest
from datetime import date, datetime, timezone
from decimal import Decimal

from django.db import DatabaseError

from apps.core.exceptions import SETUP_REQUIRED_MESSAGE
from apps.reports.services import SummaryAggregator, summarize_trips
from apps.trips.models import Trip, TripStatus

FIXED_NOW = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


class TestSummarizeTrips:
    """Tests for summarize_trips()"""

    def test_paid_and_pending(self):
        totals = summarize_trips([
            {'amount': Decimal('500'), 'status': 'paid'},
            {'amount': Decimal('300'), 'status': 'unpaid'},
            {'amount': Decimal('250'), 'status': 'unpaid'},
        ])

        assert totals == {
            'total_amount': Decimal('1050'),
            'total_paid': Decimal('500'),
            'total_pending': Decimal('550'),
            'trip_count': 3,
        }

    def test_empty(self):
        assert summarize_trips([])['trip_count'] == 0


class TestSummaryAggregatorState:
    """Refresh outcomes with an injected row source."""

    def test_refresh_success(self):
        aggregator = SummaryAggregator(
            source=lambda: [{'amount': '500', 'status': 'paid'}],
            clock=lambda: FIXED_NOW,
        )

        snapshot = aggregator.refresh()

        assert snapshot['totals']['total_paid'] == Decimal('500')
        assert snapshot['refreshed_at'] == FIXED_NOW
        assert snapshot['error'] is None
        assert snapshot['setup_required'] is None

    def test_missing_table_sets_setup_required(self):
        def missing():
            raise DatabaseError('no such table: trips')

        snapshot = SummaryAggregator(source=missing).refresh()

        assert snapshot['setup_required'] == SETUP_REQUIRED_MESSAGE
        assert snapshot['totals'] is None

    def test_store_error_is_transient(self):
        calls = []

        def flaky():
            calls.append(1)
            if len(calls) == 1:
                raise DatabaseError('connection reset')
            return [{'amount': '10', 'status': 'unpaid'}]

        aggregator = SummaryAggregator(source=flaky)

        assert 'connection reset' in aggregator.refresh()['error']
        snapshot = aggregator.refresh()
        assert snapshot['error'] is None
        assert snapshot['totals']['total_pending'] == Decimal('10')

    def test_failed_refresh_keeps_last_totals(self):
        rows = [[{'amount': '10', 'status': 'paid'}]]

        def source():
            if not rows:
                raise DatabaseError('timeout')
            return rows.pop()

        aggregator = SummaryAggregator(source=source)
        aggregator.refresh()
        snapshot = aggregator.refresh()

        assert snapshot['totals']['total_paid'] == Decimal('10')
        assert snapshot['error'] is not None

    def test_snapshot_does_not_read_store(self):
        calls = []

        def source():
            calls.append(1)
            return []

        aggregator = SummaryAggregator(source=source)
        snapshot = aggregator.snapshot()

        assert calls == []
        assert snapshot['totals'] is None


@pytest.mark.django_db
class TestSummaryAggregatorSubscription:
    """Refreshing on trips table changes."""

    def create_trip(self, amount, status=TripStatus.UNPAID):
        return Trip.objects.create(
            date=date(2024, 1, 5),
            customer_name='Ravi',
            place='Airport',
            amount=Decimal(amount),
            status=status,
        )

    def test_insert_update_delete_refresh(self, aggregator):
        aggregator.start()

        trip = self.create_trip('300.00')
        assert aggregator.totals['total_pending'] == Decimal('300.00')

        trip.status = TripStatus.PAID
        trip.save()
        assert aggregator.totals['total_paid'] == Decimal('300.00')
        assert aggregator.totals['total_pending'] == 0

        trip.delete()
        assert aggregator.totals['trip_count'] == 0

    def test_stop_unsubscribes(self, aggregator):
        aggregator.start()
        self.create_trip('100.00')
        aggregator.stop()

        self.create_trip('200.00')

        assert aggregator.totals['total_amount'] == Decimal('100.00')
        assert not aggregator.is_started

    def test_suspended_refreshes_once(self, aggregator):
        aggregator.start()
        with aggregator.suspended():
            self.create_trip('100.00')
            assert aggregator.totals is None

        assert aggregator.totals['total_amount'] == Decimal('100.00')
