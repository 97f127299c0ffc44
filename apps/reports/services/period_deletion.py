"""
Period Deletion Tool
====================

Bulk removal of trips and/or diesel expenses in a date range, behind a
two-step confirmation.

The workflow state lives in a caller-supplied mutable mapping (the Django
session in views, a plain dict in tests)::

    IDLE --preview()--> CONFIRMING --execute(confirmed=True)--> EXECUTING --> IDLE
                        CONFIRMING --cancel()--> IDLE

Example:
    tool = PeriodDeletionTool(request.session)
    preview = tool.preview(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        target=DeletionTarget.BOTH,
    )
    # ... operator reviews preview['counts'] ...
    outcome = tool.execute(confirmed=True)

Note:
    Tables are deleted one after the other with no transaction across
    them. When the second delete fails the first is not rolled back; the
    raised ``PeriodDeletionFailedError`` says which tables were purged.

    EXECUTING is only observable through the same mapping object while
    ``execute()`` runs (a callback fired by a delete, or another thread
    sharing a dict store). A Django session is written back when the
    response is sent, so a concurrent HTTP request never sees it and the
    ``DeletionInProgressError`` guard does not serialise requests.
"""

import logging
from datetime import date

from django.db import models

from apps.core.exceptions import ConfirmationRequiredError, StoreError
from apps.core.store import count_in_range, delete_in_range, store_call
from apps.expenses.models import DieselExpense
from apps.trips.models import Trip
from ..exceptions import (
    DeletionInProgressError,
    DeletionNotPreviewedError,
    InvalidDateRangeError,
    PeriodDeletionFailedError,
)
from .summary import get_aggregator

logger = logging.getLogger(__name__)

SESSION_KEY = 'period_deletion'

TRIPS_TABLE = 'trips'
DIESEL_TABLE = 'diesel'

TABLE_MODELS = {
    TRIPS_TABLE: Trip,
    DIESEL_TABLE: DieselExpense,
}


class DeletionTarget(models.TextChoices):
    TRIPS = 'trips', 'Trips only'
    DIESEL = 'diesel', 'Diesel expenses only'
    BOTH = 'both', 'Trips and diesel expenses'

    @property
    def tables(self):
        if self == DeletionTarget.BOTH:
            return [TRIPS_TABLE, DIESEL_TABLE]
        return [self.value]


class DeletionState(models.TextChoices):
    IDLE = 'idle', 'Idle'
    CONFIRMING = 'confirming', 'Awaiting confirmation'
    EXECUTING = 'executing', 'Deleting'


def validate_range(start_date, end_date):
    if start_date is None or end_date is None:
        raise InvalidDateRangeError('Please select both start and end dates')
    if start_date > end_date:
        raise InvalidDateRangeError('Start date must be before or equal to end date')


class PeriodDeletionTool:
    """
    Two-step deletion workflow bound to one session mapping.

    Args:
        store: Mutable mapping holding the workflow state.
        aggregator: Summary aggregator refreshed after a deletion; the
            process-wide one by default.
    """

    def __init__(self, store, aggregator=None):
        self._store = store
        self._aggregator = aggregator

    @classmethod
    def for_request(cls, request):
        return cls(request.session)

    @property
    def aggregator(self):
        return self._aggregator or get_aggregator()

    @property
    def pending(self):
        return self._store.get(SESSION_KEY)

    @property
    def state(self):
        pending = self.pending
        return pending['state'] if pending else DeletionState.IDLE.value

    def as_dict(self):
        pending = self.pending
        if not pending:
            return {
                'state': DeletionState.IDLE.value,
                'start_date': None,
                'end_date': None,
                'target': None,
                'counts': {},
            }
        return {
            'state': pending['state'],
            'start_date': date.fromisoformat(pending['start_date']),
            'end_date': date.fromisoformat(pending['end_date']),
            'target': pending['target'],
            'counts': dict(pending['counts']),
        }

    def _save(self, pending):
        # Reassign so session backends notice the change
        self._store[SESSION_KEY] = pending

    def _reset(self):
        self._store.pop(SESSION_KEY, None)

    def _guard_not_executing(self):
        # Same-mapping re-entry only; see the module note
        if self.state == DeletionState.EXECUTING:
            raise DeletionInProgressError('A deletion is already running')

    def preview(self, *, start_date, end_date, target=DeletionTarget.TRIPS):
        """
        Count the rows that a deletion would remove and await confirmation.

        Only count queries are issued; no rows are fetched.

        Returns:
            dict: The new workflow state (see ``as_dict``).

        Raises:
            InvalidDateRangeError: A date is missing or start > end.
            DeletionInProgressError: A deletion is running.
            StoreError: A count query failed; the state is unchanged.
        """
        validate_range(start_date, end_date)
        self._guard_not_executing()
        target = DeletionTarget(target)

        counts = {}
        for table in target.tables:
            with store_call(f'count {table}'):
                counts[table] = count_in_range(TABLE_MODELS[table], start_date, end_date)

        self._save({
            'state': DeletionState.CONFIRMING.value,
            'start_date': start_date.isoformat(),
            'end_date': end_date.isoformat(),
            'target': target.value,
            'counts': counts,
        })
        logger.info(
            'Deletion preview %s..%s (%s): %s', start_date, end_date, target.value, counts
        )
        return self.as_dict()

    def cancel(self):
        """Drop the pending preview. Cancelling with nothing pending is a no-op."""
        self._guard_not_executing()
        self._reset()
        return self.as_dict()

    def execute(self, *, confirmed=False):
        """
        Delete the previewed rows.

        Args:
            confirmed: The explicit confirmation answer; nothing is deleted
                unless it is True.

        Returns:
            dict: ``start_date``, ``end_date``, ``target`` and ``deleted``
            (table name to rows removed).

        Raises:
            DeletionNotPreviewedError: No preview is awaiting confirmation.
            ConfirmationRequiredError: ``confirmed`` is not True.
            PeriodDeletionFailedError: A table delete failed. Tables listed
                in its ``deleted`` attribute stay purged and the preview
                stays pending.
        """
        pending = self.pending
        if not pending or pending['state'] != DeletionState.CONFIRMING:
            if pending and pending['state'] == DeletionState.EXECUTING:
                raise DeletionInProgressError('A deletion is already running')
            raise DeletionNotPreviewedError('Preview the deletion before executing it')
        if confirmed is not True:
            raise ConfirmationRequiredError()

        start_date = date.fromisoformat(pending['start_date'])
        end_date = date.fromisoformat(pending['end_date'])
        target = DeletionTarget(pending['target'])
        self._save({**pending, 'state': DeletionState.EXECUTING.value})

        deleted = {}
        with self.aggregator.suspended():
            for table in target.tables:
                try:
                    with store_call(f'delete {table}'):
                        deleted[table] = delete_in_range(
                            TABLE_MODELS[table], start_date, end_date
                        )
                except StoreError as exc:
                    self._save({**pending, 'state': DeletionState.CONFIRMING.value})
                    logger.error(
                        'Deletion %s..%s stopped at %s after purging %s: %s',
                        start_date, end_date, table, deleted or 'nothing', exc.detail,
                    )
                    raise PeriodDeletionFailedError(
                        f'Error deleting data: {exc.detail}',
                        deleted=deleted,
                        failed_table=table,
                    ) from exc
                logger.warning(
                    'Deleted %d %s rows between %s and %s',
                    deleted[table], table, start_date, end_date,
                )

        self._reset()
        return {
            'start_date': start_date,
            'end_date': end_date,
            'target': target.value,
            'deleted': deleted,
        }
