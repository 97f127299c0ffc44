from datetime import date, timedelta
from decimal import Decimal
from types import SimpleNamespace

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm

from apps.reports.services import ReportResult, render_csv, render_pdf, resolve_period
from apps.reports.services.pdf_export import MARGIN, TRIP_COLUMNS


def make_trip(day, customer='Ravi', place='Airport', amount='500.00', status='paid'):
    return SimpleNamespace(
        date=day,
        customer_name=customer,
        place=place,
        amount=Decimal(amount),
        status=status,
    )


def make_result(trips=(), diesel=()):
    return ReportResult(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        trips=list(trips),
        diesel_expenses=list(diesel),
        total_amount=Decimal('800.00'),
        total_paid=Decimal('500.00'),
        total_pending=Decimal('300.00'),
        total_diesel=Decimal('200.00'),
        net_amount=Decimal('600.00'),
    )


class TestRenderCsv:
    """Tests for render_csv()"""

    def test_header_and_rows(self):
        result = make_result([
            make_trip(date(2024, 1, 5)),
            make_trip(date(2024, 1, 10), customer='Meena', place='Railway Station',
                      amount='300.00', status='unpaid'),
        ])

        lines = render_csv(result).splitlines()

        assert lines[0] == 'Date,Customer Name,Place,Amount,Status'
        assert lines[1] == '"2024-01-05","Ravi","Airport","500.00","paid"'
        assert len(lines) == 3

    def test_empty_report_has_header_only(self):
        assert render_csv(make_result()) == 'Date,Customer Name,Place,Amount,Status\n'

    def test_embedded_quote_and_comma(self):
        result = make_result([make_trip(date(2024, 1, 5), customer='Ravi "RK", Jr')])

        row = render_csv(result).splitlines()[1]

        assert '"Ravi ""RK"", Jr"' in row


class TestRenderPdf:
    """Tests for render_pdf()"""

    def test_is_pdf(self):
        period = resolve_period('monthly', month='2024-01')
        data = render_pdf(make_result([make_trip(date(2024, 1, 5))]), period)

        assert data.startswith(b'%PDF')

    def test_single_page_content(self, settings):
        settings.BUSINESS_NAME = 'Siva Cabs'
        settings.PDF_CURRENCY_LABEL = 'Rs.'
        period = resolve_period('monthly', month='2024-01')
        result = make_result(
            [make_trip(date(2024, 1, 5), customer='A very long customer name indeed')],
            [SimpleNamespace(date=date(2024, 1, 7), amount=Decimal('200.00'))],
        )

        data = render_pdf(result, period, generated_on=date(2024, 2, 1), compress=False)

        assert b'Siva Cabs - Trip Report' in data
        assert b'Month: January 2024' in data
        assert b'Net Amount:' in data
        assert b'Rs.600.00' in data
        assert b'Trips \\(1\\)' in data
        assert b'Diesel Expenses \\(1\\)' in data
        assert b'A very long customer' in data
        assert b'A very long customer ' not in data
        assert b'Page 1 of 1 - Generated on 01/02/2024' in data

    def test_page_breaks_number_every_page(self):
        period = resolve_period('yearly', year=2024)
        trips = [make_trip(date(2024, 1, 1) + timedelta(days=i)) for i in range(120)]

        data = render_pdf(make_result(trips), period, generated_on=date(2024, 2, 1), compress=False)

        assert b'Page 1 of 1 ' not in data
        assert b'Page 1 of ' in data
        assert b'Page 3 of ' in data

    def test_trip_columns_fit_page(self):
        last_heading, last_x = TRIP_COLUMNS[-1]

        assert [x for _, x in TRIP_COLUMNS] == sorted(x for _, x in TRIP_COLUMNS)
        assert last_heading == 'Status'
        assert last_x + 30 * mm < A4[0] - MARGIN / 2
