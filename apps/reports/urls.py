from django.urls import path
from . import views

app_name = 'reports'

urlpatterns = [
    # Summary
    path('summary/', views.summary, name='summary'),
    path('summary/refresh/', views.summary_refresh, name='summary-refresh'),

    # Period reports
    path('reports/', views.report, name='report'),
    path('reports/csv/', views.report_csv, name='report-csv'),
    path('reports/pdf/', views.report_pdf, name='report-pdf'),

    # Period deletion
    path('period-deletion/', views.deletion_state, name='period-deletion'),
    path('period-deletion/preview/', views.deletion_preview, name='period-deletion-preview'),
    path('period-deletion/execute/', views.deletion_execute, name='period-deletion-execute'),
    path('period-deletion/cancel/', views.deletion_cancel, name='period-deletion-cancel'),
]
