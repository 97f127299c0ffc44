from django.http import HttpResponse
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .exceptions import (
    DeletionInProgressError,
    DeletionNotPreviewedError,
    PeriodDeletionFailedError,
    ReportsServiceError,
)
from .serializers import (
    # Input serializers
    ReportQuerySerializer,
    DeletionPreviewSerializer,
    DeletionExecuteSerializer,
    # Response serializers
    SummarySerializer,
    ReportSerializer,
    DeletionStateSerializer,
    DeletionOutcomeSerializer,
    DeletionFailureSerializer,
    ErrorSerializer,
)
from .services import (
    PeriodDeletionTool,
    generate_report,
    get_aggregator,
    render_csv,
    render_pdf,
)
from .services.csv_export import CSV_CONTENT_TYPE

REPORT_PARAMETERS = [
    OpenApiParameter('report_type', OpenApiTypes.STR, description='daily, monthly, yearly or range'),
    OpenApiParameter('date', OpenApiTypes.DATE, description='Day of a daily report (YYYY-MM-DD)'),
    OpenApiParameter('month', OpenApiTypes.STR, description='Month of a monthly report (YYYY-MM)'),
    OpenApiParameter('year', OpenApiTypes.INT, description='Year of a yearly report'),
    OpenApiParameter('start_date', OpenApiTypes.DATE, description='First day of a range report'),
    OpenApiParameter('end_date', OpenApiTypes.DATE, description='Last day of a range report'),
]


# =============================================================================
# Summary
# =============================================================================

@extend_schema(
    responses={200: SummarySerializer},
    description="Paid and pending totals over all trips.",
    tags=['summary'],
)
@api_view(['GET'])
def summary(request):
    """Summary re-read from the store on every request."""
    snapshot = get_aggregator().refresh()
    return Response(SummarySerializer(snapshot).data)


@extend_schema(
    request=None,
    responses={200: SummarySerializer},
    description="Re-read every trip and recompute the summary.",
    tags=['summary'],
)
@api_view(['POST'])
def summary_refresh(request):
    snapshot = get_aggregator().refresh()
    return Response(SummarySerializer(snapshot).data)


# =============================================================================
# Period reports
# =============================================================================

def _build_report(request):
    query_serializer = ReportQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    period = query_serializer.validated_data['period']
    return period, generate_report(period)


def _attachment(content, content_type, filename):
    response = HttpResponse(content, content_type=content_type)
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


@extend_schema(
    parameters=REPORT_PARAMETERS,
    responses={200: ReportSerializer, 400: ErrorSerializer},
    description="Trips, diesel expenses and totals for a day, month, year or date range.",
    tags=['reports'],
)
@api_view(['GET'])
def report(request):
    """Generate a period report - thin HTTP handler."""
    period, result = _build_report(request)
    data = {
        'report_type': period.report_type,
        'label': period.label(),
        'start_date': result.start_date,
        'end_date': result.end_date,
        'trips': result.trips,
        'diesel_expenses': result.diesel_expenses,
        **result.totals(),
    }
    return Response(ReportSerializer(data).data)


@extend_schema(
    parameters=REPORT_PARAMETERS,
    responses={(200, 'text/csv'): OpenApiTypes.STR, 400: ErrorSerializer},
    description="Download the period's trips as CSV.",
    tags=['reports'],
)
@api_view(['GET'])
def report_csv(request):
    period, result = _build_report(request)
    return _attachment(
        render_csv(result).encode('utf-8'),
        CSV_CONTENT_TYPE,
        period.filename('csv'),
    )


@extend_schema(
    parameters=REPORT_PARAMETERS,
    responses={(200, 'application/pdf'): OpenApiTypes.BINARY, 400: ErrorSerializer},
    description="Download the period report as PDF.",
    tags=['reports'],
)
@api_view(['GET'])
def report_pdf(request):
    period, result = _build_report(request)
    return _attachment(
        render_pdf(result, period),
        'application/pdf',
        period.filename('pdf'),
    )


# =============================================================================
# Period deletion
# =============================================================================

@extend_schema(
    responses={200: DeletionStateSerializer},
    description="Pending period deletion, if any.",
    tags=['period-deletion'],
)
@api_view(['GET'])
def deletion_state(request):
    tool = PeriodDeletionTool.for_request(request)
    return Response(DeletionStateSerializer(tool.as_dict()).data)


@extend_schema(
    request=DeletionPreviewSerializer,
    responses={200: DeletionStateSerializer, 400: ErrorSerializer, 409: ErrorSerializer},
    description="Count the rows a deletion would remove and await confirmation.",
    tags=['period-deletion'],
)
@api_view(['POST'])
def deletion_preview(request):
    input_serializer = DeletionPreviewSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    tool = PeriodDeletionTool.for_request(request)
    try:
        state = tool.preview(**input_serializer.validated_data)
    except DeletionInProgressError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
    except ReportsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(DeletionStateSerializer(state).data)


@extend_schema(
    request=DeletionExecuteSerializer,
    responses={
        200: DeletionOutcomeSerializer,
        400: ErrorSerializer,
        409: ErrorSerializer,
        503: DeletionFailureSerializer,
    },
    description="Delete the previewed rows. Requires confirm=true.",
    tags=['period-deletion'],
)
@api_view(['POST'])
def deletion_execute(request):
    input_serializer = DeletionExecuteSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    tool = PeriodDeletionTool.for_request(request)
    try:
        outcome = tool.execute(confirmed=input_serializer.validated_data['confirm'])
    except (DeletionNotPreviewedError, DeletionInProgressError) as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
    except PeriodDeletionFailedError as e:
        return Response(
            {'error': str(e), 'failed_table': e.failed_table, 'deleted': e.deleted},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return Response(DeletionOutcomeSerializer(outcome).data)


@extend_schema(
    request=None,
    responses={200: DeletionStateSerializer, 409: ErrorSerializer},
    description="Discard the pending deletion preview.",
    tags=['period-deletion'],
)
@api_view(['POST'])
def deletion_cancel(request):
    tool = PeriodDeletionTool.for_request(request)
    try:
        state = tool.cancel()
    except DeletionInProgressError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
    return Response(DeletionStateSerializer(state).data)
