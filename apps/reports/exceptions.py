"""
Domain exceptions for reports app.

These are raised by the reports services layer and translated to HTTP
responses by the views.

Exception Hierarchy:
    ReportsServiceError (base)
    ├── InvalidReportPeriodError
    ├── InvalidDateRangeError
    └── PeriodDeletionError
        ├── DeletionNotPreviewedError
        ├── DeletionInProgressError
        └── PeriodDeletionFailedError

Usage:
    from apps.reports.exceptions import InvalidReportPeriodError

    if start > end:
        raise InvalidReportPeriodError('Start date must be before or equal to end date')
"""


class ReportsServiceError(Exception):
    """
    Base exception for all reports service errors.

    Views catch this to turn any rule violation into a 400 response:

        try:
            period = resolve_period(...)
        except ReportsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidReportPeriodError(ReportsServiceError):
    """
    Raised when a report period cannot be resolved.

    Covers an unknown report type, a missing date/month/year, and a range
    whose start is after its end.
    """

    pass


class InvalidDateRangeError(ReportsServiceError):
    """Raised when a deletion range is incomplete or reversed."""

    pass


class PeriodDeletionError(ReportsServiceError):
    """Base for period deletion workflow errors."""

    pass


class DeletionNotPreviewedError(PeriodDeletionError):
    """
    Raised when execute is requested with no pending preview.

    The preview is the in-app confirmation step; a deletion can only run
    over the interval and tables the operator has just seen counted.
    """

    pass


class DeletionInProgressError(PeriodDeletionError):
    """Raised when preview or cancel is attempted while a deletion runs."""

    pass


class PeriodDeletionFailedError(PeriodDeletionError):
    """
    Raised when a table delete fails part-way.

    Tables are purged one after another without a spanning transaction,
    so ``deleted`` reports what was already removed before the failure.

    Attributes:
        deleted (dict): Table name to number of rows removed.
        failed_table (str): Table whose delete raised.
    """

    def __init__(self, message, *, deleted=None, failed_table=''):
        super().__init__(message)
        self.deleted = dict(deleted or {})
        self.failed_table = failed_table
