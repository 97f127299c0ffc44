"""Diesel expense service - create, update and delete fuel cost entries."""

import logging
from datetime import date as date_type
from decimal import Decimal

from apps.core.store import store_call
from .models import DieselExpense

logger = logging.getLogger(__name__)


def create_expense(*, date: date_type, amount: Decimal) -> DieselExpense:
    """Insert a diesel expense and return the stored row."""
    with store_call('create diesel expense'):
        expense = DieselExpense.objects.create(date=date, amount=amount)
        expense.refresh_from_db()
    logger.info('Created diesel expense %s on %s for %s', expense.pk, expense.date, expense.amount)
    return expense


def update_expense(expense: DieselExpense, **changes) -> DieselExpense:
    """Apply ``changes`` to ``expense`` and return the stored row."""
    for field, value in changes.items():
        setattr(expense, field, value)
    with store_call('update diesel expense'):
        expense.save()
        expense.refresh_from_db()
    return expense


def delete_expense(expense: DieselExpense) -> None:
    expense_id = expense.pk
    with store_call('delete diesel expense'):
        expense.delete()
    logger.info('Deleted diesel expense %s', expense_id)
