from django.apps import AppConfig


class ReportsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.reports'
    label = 'reports'

    def ready(self):
        from .services.summary import start_default_aggregator
        start_default_aggregator()
