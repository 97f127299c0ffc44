import pytest
from datetime import date

from apps.reports.exceptions import InvalidReportPeriodError
from apps.reports.services import ReportType, ReportPeriod, resolve_period


class TestResolvePeriod:
    """Tests for resolve_period()"""

    def test_daily(self):
        period = resolve_period('daily', date=date(2024, 1, 5))

        assert period == ReportPeriod(ReportType.DAILY, date(2024, 1, 5), date(2024, 1, 5))

    def test_daily_requires_date(self):
        with pytest.raises(InvalidReportPeriodError):
            resolve_period('daily')

    @pytest.mark.parametrize('month,last_day', [
        ('2024-02', date(2024, 2, 29)),
        ('2023-02', date(2023, 2, 28)),
        ('2024-04', date(2024, 4, 30)),
        ('2024-12', date(2024, 12, 31)),
    ])
    def test_monthly_last_day(self, month, last_day):
        period = resolve_period('monthly', month=month)

        assert period.start == last_day.replace(day=1)
        assert period.end == last_day

    def test_monthly_invalid_month(self):
        with pytest.raises(InvalidReportPeriodError):
            resolve_period('monthly', month='2024-13')

    def test_monthly_year_zero(self):
        with pytest.raises(InvalidReportPeriodError, match='Invalid year'):
            resolve_period('monthly', month='0000-01')

    def test_yearly_year_zero(self):
        with pytest.raises(InvalidReportPeriodError):
            resolve_period('yearly', year=0)

    def test_yearly(self):
        period = resolve_period('yearly', year=2024)

        assert period.start == date(2024, 1, 1)
        assert period.end == date(2024, 12, 31)

    def test_yearly_accepts_text(self):
        assert resolve_period('yearly', year='2023').end == date(2023, 12, 31)

    def test_range(self):
        period = resolve_period('range', start_date=date(2024, 1, 1), end_date=date(2024, 3, 15))

        assert (period.start, period.end) == (date(2024, 1, 1), date(2024, 3, 15))

    def test_range_same_day(self):
        period = resolve_period('range', start_date=date(2024, 1, 1), end_date=date(2024, 1, 1))

        assert period.start == period.end

    def test_range_reversed(self):
        with pytest.raises(InvalidReportPeriodError, match='before or equal'):
            resolve_period('range', start_date=date(2024, 2, 1), end_date=date(2024, 1, 1))

    def test_range_missing_end(self):
        with pytest.raises(InvalidReportPeriodError, match='both start and end'):
            resolve_period('range', start_date=date(2024, 2, 1))

    def test_unknown_type(self):
        with pytest.raises(InvalidReportPeriodError, match='Invalid report type'):
            resolve_period('weekly', date=date(2024, 1, 1))


class TestReportPeriodNaming:
    """Tests for ReportPeriod.filename() and label()"""

    def test_filenames(self, settings):
        settings.REPORT_FILENAME_PREFIX = 'siva-cabs-report'

        assert resolve_period('daily', date=date(2024, 1, 5)).filename('csv') == \
            'siva-cabs-report-daily-2024-01-05.csv'
        assert resolve_period('monthly', month='2024-01').filename('pdf') == \
            'siva-cabs-report-monthly-2024-01.pdf'
        assert resolve_period('yearly', year=2024).filename('csv') == \
            'siva-cabs-report-yearly-2024.csv'
        assert resolve_period(
            'range', start_date=date(2024, 1, 1), end_date=date(2024, 1, 31)
        ).filename('csv') == 'siva-cabs-report-range-2024-01-01-to-2024-01-31.csv'

    def test_labels(self):
        assert resolve_period('daily', date=date(2024, 1, 5)).label() == 'Date: 05/01/2024'
        assert resolve_period('monthly', month='2024-01').label() == 'Month: January 2024'
        assert resolve_period('yearly', year=2024).label() == 'Year: 2024'
        assert resolve_period(
            'range', start_date=date(2024, 1, 1), end_date=date(2024, 1, 31)
        ).label() == 'Period: 01/01/2024 to 31/01/2024'
