"""CSV export of a report's trips."""

import csv
import io

CSV_HEADERS = ['Date', 'Customer Name', 'Place', 'Amount', 'Status']
CSV_CONTENT_TYPE = 'text/csv; charset=utf-8'


def render_csv(result):
    """
    Render the trips of ``result`` as CSV text.

    The header line is written bare; every data field is double-quoted
    (embedded quotes doubled). Lines end with ``\\n``.
    """
    buffer = io.StringIO()
    buffer.write(','.join(CSV_HEADERS) + '\n')
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
    for trip in result.trips:
        writer.writerow([
            trip.date.isoformat(),
            trip.customer_name,
            trip.place,
            trip.amount,
            trip.status,
        ])
    return buffer.getvalue()
