import pytest
from datetime import date
from decimal import Decimal

from django.db import DatabaseError

from apps.core.exceptions import ConfirmationRequiredError
from apps.core.store import DELETE, subscribe
from apps.expenses.models import DieselExpense
from apps.reports.exceptions import (
    DeletionInProgressError,
    DeletionNotPreviewedError,
    InvalidDateRangeError,
    PeriodDeletionFailedError,
)
from apps.reports.services import DeletionState, DeletionTarget, PeriodDeletionTool
from apps.reports.services import period_deletion
from apps.trips.models import Trip

JAN_1 = date(2024, 1, 1)
JAN_31 = date(2024, 1, 31)


@pytest.fixture
def session():
    return {}


@pytest.fixture
def tool(session, aggregator):
    return PeriodDeletionTool(session, aggregator=aggregator)


class TestPreviewValidation:
    """Range checks run before any query."""

    def test_missing_date(self, tool):
        with pytest.raises(InvalidDateRangeError):
            tool.preview(start_date=JAN_1, end_date=None)

    def test_reversed_range(self, tool, session):
        with pytest.raises(InvalidDateRangeError):
            tool.preview(start_date=JAN_31, end_date=JAN_1)
        assert session == {}

    def test_execute_without_preview(self, tool):
        with pytest.raises(DeletionNotPreviewedError):
            tool.execute(confirmed=True)


@pytest.mark.django_db
class TestPeriodDeletion:
    """Tests for PeriodDeletionTool"""

    def test_preview_counts_inclusive_bounds(self, tool, boundary_rows):
        state = tool.preview(start_date=JAN_1, end_date=JAN_31, target=DeletionTarget.BOTH)

        assert state['state'] == DeletionState.CONFIRMING
        assert state['counts'] == {'trips': 2, 'diesel': 1}

    def test_preview_only_selected_table(self, tool, boundary_rows):
        state = tool.preview(start_date=JAN_1, end_date=JAN_31, target=DeletionTarget.DIESEL)

        assert state['counts'] == {'diesel': 1}

    def test_execute_deletes_previewed_rows(self, tool, boundary_rows):
        preview = tool.preview(start_date=JAN_1, end_date=JAN_31, target=DeletionTarget.BOTH)

        outcome = tool.execute(confirmed=True)

        assert outcome['deleted'] == preview['counts']
        assert set(Trip.objects.values_list('customer_name', flat=True)) == {'C', 'D'}
        assert list(DieselExpense.objects.values_list('amount', flat=True)) == [Decimal('60.00')]
        assert tool.state == DeletionState.IDLE

    def test_trips_only_leaves_diesel(self, tool, boundary_rows):
        tool.preview(start_date=JAN_1, end_date=JAN_31)

        tool.execute(confirmed=True)

        assert DieselExpense.objects.count() == 2

    def test_execute_requires_explicit_confirmation(self, tool, boundary_rows):
        tool.preview(start_date=JAN_1, end_date=JAN_31)

        with pytest.raises(ConfirmationRequiredError):
            tool.execute(confirmed=False)

        assert Trip.objects.count() == 4
        assert tool.state == DeletionState.CONFIRMING

    def test_cancel(self, tool, boundary_rows):
        tool.preview(start_date=JAN_1, end_date=JAN_31)

        state = tool.cancel()

        assert state['state'] == DeletionState.IDLE
        with pytest.raises(DeletionNotPreviewedError):
            tool.execute(confirmed=True)

    def test_execute_refreshes_summary(self, tool, aggregator, boundary_rows):
        tool.preview(start_date=JAN_1, end_date=JAN_31)

        tool.execute(confirmed=True)

        assert aggregator.totals['trip_count'] == 2
        assert aggregator.totals['total_amount'] == Decimal('120.00')

    def test_partial_failure_reports_purged_tables(self, tool, boundary_rows, monkeypatch):
        real_delete = period_deletion.delete_in_range

        def failing_delete(model, start, end):
            if model is DieselExpense:
                raise DatabaseError('permission denied for table diesel_expenses')
            return real_delete(model, start, end)

        monkeypatch.setattr(period_deletion, 'delete_in_range', failing_delete)
        tool.preview(start_date=JAN_1, end_date=JAN_31, target=DeletionTarget.BOTH)

        with pytest.raises(PeriodDeletionFailedError) as excinfo:
            tool.execute(confirmed=True)

        assert excinfo.value.deleted == {'trips': 2}
        assert excinfo.value.failed_table == 'diesel'
        assert Trip.objects.count() == 2
        assert DieselExpense.objects.count() == 2
        assert tool.state == DeletionState.CONFIRMING


@pytest.mark.django_db
class TestReentryWhileExecuting:
    """The EXECUTING state as seen through the shared mapping."""

    def test_preview_from_delete_callback_is_refused(self, session, aggregator, boundary_rows):
        tool = PeriodDeletionTool(session, aggregator=aggregator)
        seen = []

        def reenter(event):
            try:
                PeriodDeletionTool(session, aggregator=aggregator).preview(
                    start_date=JAN_1, end_date=JAN_31,
                )
            except DeletionInProgressError as e:
                seen.append(str(e))

        tool.preview(start_date=JAN_1, end_date=JAN_31)
        unsubscribe = subscribe(Trip, reenter, events=[DELETE])
        try:
            tool.execute(confirmed=True)
        finally:
            unsubscribe()

        assert seen == ['A deletion is already running'] * 2
        assert tool.state == DeletionState.IDLE

    def test_cancel_while_executing_is_refused(self, session, aggregator):
        session['period_deletion'] = {
            'state': DeletionState.EXECUTING.value,
            'start_date': '2024-01-01',
            'end_date': '2024-01-31',
            'target': 'trips',
            'counts': {'trips': 0},
        }

        with pytest.raises(DeletionInProgressError):
            PeriodDeletionTool(session, aggregator=aggregator).cancel()
