from .report_period import ReportType, ReportPeriod, resolve_period
from .report_builder import ReportResult, aggregate_totals, generate_report
from .csv_export import CSV_HEADERS, render_csv
from .pdf_export import render_pdf
from .summary import SummaryAggregator, summarize_trips, get_aggregator
from .period_deletion import DeletionTarget, DeletionState, PeriodDeletionTool

__all__ = [
    'ReportType',
    'ReportPeriod',
    'resolve_period',
    'ReportResult',
    'aggregate_totals',
    'generate_report',
    'CSV_HEADERS',
    'render_csv',
    'render_pdf',
    'SummaryAggregator',
    'summarize_trips',
    'get_aggregator',
    'DeletionTarget',
    'DeletionState',
    'PeriodDeletionTool',
]
