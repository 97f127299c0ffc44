"""
Report periods - resolve a report type and its inputs into a date interval.

A period is always an inclusive ``[start, end]`` pair of calendar dates.
Resolution happens before any query is issued, so an invalid request never
reaches the store.
"""

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date as date_type

from django.conf import settings
from django.db import models

from ..exceptions import InvalidReportPeriodError


class ReportType(models.TextChoices):
    DAILY = 'daily', 'Daily'
    MONTHLY = 'monthly', 'Monthly'
    YEARLY = 'yearly', 'Yearly'
    RANGE = 'range', 'Date range'


@dataclass(frozen=True)
class ReportPeriod:
    """Resolved report interval, both bounds inclusive."""

    report_type: str
    start: date_type
    end: date_type

    def bounds(self):
        """Text identifying the period in file names."""
        if self.report_type == ReportType.DAILY:
            return self.start.isoformat()
        if self.report_type == ReportType.MONTHLY:
            return self.start.strftime('%Y-%m')
        if self.report_type == ReportType.YEARLY:
            return f'{self.start.year:04d}'
        return f'{self.start.isoformat()}-to-{self.end.isoformat()}'

    def filename(self, extension, prefix=None):
        """
        Download file name, e.g. ``siva-cabs-report-monthly-2024-01.csv``.

        Args:
            extension: File extension without the dot.
            prefix: Overrides ``settings.REPORT_FILENAME_PREFIX``.
        """
        prefix = prefix or settings.REPORT_FILENAME_PREFIX
        return f'{prefix}-{self.report_type}-{self.bounds()}.{extension}'

    def label(self):
        """Human readable period line used as the PDF subtitle."""
        if self.report_type == ReportType.DAILY:
            return f'Date: {_display_date(self.start)}'
        if self.report_type == ReportType.MONTHLY:
            return f'Month: {self.start.strftime("%B %Y")}'
        if self.report_type == ReportType.YEARLY:
            return f'Year: {self.start.year}'
        return f'Period: {_display_date(self.start)} to {_display_date(self.end)}'


def _display_date(value):
    return value.strftime('%d/%m/%Y')


def _parse_month(month):
    if isinstance(month, date_type):
        return month.year, month.month
    try:
        year, month_number = (int(part) for part in str(month).split('-'))
    except ValueError:
        raise InvalidReportPeriodError('Invalid month. Use YYYY-MM')
    if not 1 <= month_number <= 12:
        raise InvalidReportPeriodError('Invalid month. Use YYYY-MM')
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidReportPeriodError(f'Invalid year: {year}')
    return year, month_number


def resolve_period(report_type, *, date=None, month=None, year=None,
                   start_date=None, end_date=None):
    """
    Resolve ``report_type`` and the matching input into a ReportPeriod.

    Args:
        report_type: One of ``ReportType``.
        date: The day for a daily report.
        month: ``'YYYY-MM'`` (or any date in the month) for a monthly report.
        year: The year for a yearly report.
        start_date: First day of a range report.
        end_date: Last day of a range report.

    Returns:
        ReportPeriod

    Raises:
        InvalidReportPeriodError: Unknown type, missing input, or a range
            whose start is after its end.

    Example:
        >>> resolve_period('monthly', month='2024-02').end
        datetime.date(2024, 2, 29)
    """
    if report_type == ReportType.DAILY:
        if date is None:
            raise InvalidReportPeriodError('Please select a date')
        return ReportPeriod(ReportType.DAILY, date, date)

    if report_type == ReportType.MONTHLY:
        if not month:
            raise InvalidReportPeriodError('Please select a month')
        year_number, month_number = _parse_month(month)
        last_day = calendar.monthrange(year_number, month_number)[1]
        return ReportPeriod(
            ReportType.MONTHLY,
            date_type(year_number, month_number, 1),
            date_type(year_number, month_number, last_day),
        )

    if report_type == ReportType.YEARLY:
        if year in (None, ''):
            raise InvalidReportPeriodError('Please select a year')
        try:
            year_number = int(year)
            return ReportPeriod(
                ReportType.YEARLY,
                date_type(year_number, 1, 1),
                date_type(year_number, 12, 31),
            )
        except ValueError:
            raise InvalidReportPeriodError(f'Invalid year: {year}')

    if report_type == ReportType.RANGE:
        if start_date is None or end_date is None:
            raise InvalidReportPeriodError(
                'Please select both start and end dates for the range'
            )
        if start_date > end_date:
            raise InvalidReportPeriodError(
                'Start date must be before or equal to end date'
            )
        return ReportPeriod(ReportType.RANGE, start_date, end_date)

    raise InvalidReportPeriodError(
        f"Invalid report type: '{report_type}'. "
        f"Valid options: {', '.join(ReportType.values)}"
    )
