"""
PDF export of a report, drawn with the reportlab canvas.

Layout (A4, millimetre offsets from the top-left like the page is read):
title, period label, the five summary figures, the trips table and the
diesel table. Table headers are redrawn after every page break and each
page gets a ``Page X of Y - Generated on <date>`` footer once the total
page count is known.
"""

import io

from django.conf import settings
from django.utils import timezone
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

TOP = 20 * mm
MARGIN = 20 * mm
# Section headings need this much room below them or they move to a new page
SECTION_RESERVE = 40 * mm
ROW_RESERVE = 20 * mm
ROW_HEIGHT = 7 * mm
TRUNCATE_AT = 20

TRIP_COLUMNS = [
    ('Date', 20 * mm),
    ('Customer', 50 * mm),
    ('Place', 100 * mm),
    ('Amount', 130 * mm),
    ('Status', 160 * mm),
]
DIESEL_COLUMNS = [
    ('Date', 20 * mm),
    ('Amount', 100 * mm),
]


class NumberedCanvas(canvas.Canvas):
    """Canvas that defers page emission so each page can show the total."""

    def __init__(self, *args, footer_date='', **kwargs):
        super().__init__(*args, **kwargs)
        self._page_states = []
        self._footer_date = footer_date

    def showPage(self):
        self._page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        total = len(self._page_states)
        for state in self._page_states:
            self.__dict__.update(state)
            self._draw_footer(total)
            super().showPage()
        super().save()

    def _draw_footer(self, total):
        width, _ = self._pagesize
        self.setFont('Helvetica', 8)
        self.drawCentredString(
            width / 2,
            10 * mm,
            f'Page {self._pageNumber} of {total} - Generated on {self._footer_date}',
        )


def _money(amount, currency):
    return f'{currency}{amount:.2f}'


def _short_date(value):
    return value.strftime('%d/%m/%Y')


class _ReportLayout:
    """Top-down cursor over a NumberedCanvas."""

    def __init__(self, pdf):
        self.pdf = pdf
        self.width, self.height = A4
        self.y = self.height - TOP

    def new_page(self):
        self.pdf.showPage()
        self.y = self.height - TOP

    def ensure(self, reserve):
        """Start a new page if less than ``reserve`` remains; True if it did."""
        if self.y < reserve:
            self.new_page()
            return True
        return False

    def text(self, x, value, font='Helvetica', size=10):
        self.pdf.setFont(font, size)
        self.pdf.drawString(x, self.y, value)

    def centred(self, value, font='Helvetica', size=12):
        self.pdf.setFont(font, size)
        self.pdf.drawCentredString(self.width / 2, self.y, value)

    def table_header(self, columns):
        for heading, x in columns:
            self.text(x, heading, font='Helvetica-Bold', size=9)
        self.y -= 6 * mm
        self.pdf.setLineWidth(0.5)
        self.pdf.line(MARGIN, self.y, self.width - MARGIN, self.y)
        self.y -= 5 * mm

    def table(self, title, columns, rows):
        self.y -= 10 * mm
        self.ensure(SECTION_RESERVE)
        self.text(MARGIN, title, font='Helvetica-Bold', size=12)
        self.y -= 8 * mm
        self.table_header(columns)
        for cells in rows:
            if self.ensure(ROW_RESERVE):
                self.table_header(columns)
            for (_, x), cell in zip(columns, cells):
                self.text(x, cell, size=9)
            self.y -= ROW_HEIGHT


def render_pdf(result, period, generated_on=None, compress=True):
    """
    Render ``result`` as PDF bytes.

    Args:
        result: ReportResult to draw.
        period: ReportPeriod the result was generated for (subtitle).
        generated_on: Date printed in the footer; defaults to today.
        compress: Compress page streams.
    """
    generated_on = generated_on or timezone.localdate()
    currency = settings.PDF_CURRENCY_LABEL
    title = f'{settings.BUSINESS_NAME} - Trip Report'

    buffer = io.BytesIO()
    pdf = NumberedCanvas(
        buffer,
        pagesize=A4,
        pageCompression=1 if compress else 0,
        footer_date=_short_date(generated_on),
    )
    pdf.setTitle(title)
    layout = _ReportLayout(pdf)

    layout.centred(title, font='Helvetica-Bold', size=18)
    layout.y -= 10 * mm
    layout.centred(period.label(), size=12)
    layout.y -= 15 * mm

    summary = [
        ('Total Amount', result.total_amount),
        ('Total Paid', result.total_paid),
        ('Total Pending', result.total_pending),
        ('Diesel Expenses', result.total_diesel),
        ('Net Amount', result.net_amount),
    ]
    for label, amount in summary:
        layout.ensure(30 * mm)
        layout.text(MARGIN, f'{label}:')
        layout.text(80 * mm, _money(amount, currency), font='Helvetica-Bold')
        layout.y -= 8 * mm

    if result.trips:
        layout.table(
            f'Trips ({len(result.trips)})',
            TRIP_COLUMNS,
            (
                [
                    _short_date(trip.date),
                    trip.customer_name[:TRUNCATE_AT],
                    trip.place[:TRUNCATE_AT],
                    _money(trip.amount, currency),
                    trip.status,
                ]
                for trip in result.trips
            ),
        )

    if result.diesel_expenses:
        layout.table(
            f'Diesel Expenses ({len(result.diesel_expenses)})',
            DIESEL_COLUMNS,
            (
                [_short_date(expense.date), _money(expense.amount, currency)]
                for expense in result.diesel_expenses
            ),
        )

    pdf.showPage()
    pdf.save()
    return buffer.getvalue()
