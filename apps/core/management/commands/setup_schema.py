"""
Management command to apply the bundled SQL schema.

One-time setup for a hosted database that is not managed by Django
migrations. Statements whose objects already exist are skipped; any other
error stops the run.

Usage:
    python manage.py setup_schema
    python manage.py setup_schema --path /srv/schema.sql --database hosted
    python manage.py setup_schema --dry-run
"""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import connections

from apps.core.exceptions import SchemaSetupError
from apps.core.services import load_schema, split_statements, run_schema


class Command(BaseCommand):
    help = 'Apply the SQL schema file to the database (idempotent)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--path',
            default=None,
            help='SQL file to apply (defaults to settings.SCHEMA_SQL_PATH)',
        )
        parser.add_argument(
            '--database',
            default='default',
            help='Database alias to run against',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='List the statements without executing them',
        )

    def handle(self, *args, **options):
        path = options['path'] or settings.SCHEMA_SQL_PATH

        try:
            sql = load_schema(path)
        except SchemaSetupError as e:
            raise CommandError(str(e))

        statements = split_statements(sql)
        self.stdout.write(f'Found {len(statements)} SQL statements in {path}\n')

        if options['dry_run']:
            for index, statement in enumerate(statements, start=1):
                self.stdout.write(f'  [{index}/{len(statements)}] {_preview(statement)}')
            self.stdout.write(
                self.style.WARNING('\n--dry-run mode: No changes made.')
            )
            return

        def report(index, total, statement, outcome):
            line = f'  [{index}/{total}] {_preview(statement)}'
            if outcome == 'ok':
                self.stdout.write(f'{line} ... ' + self.style.SUCCESS('ok'))
            else:
                self.stdout.write(f'{line} ... ' + self.style.WARNING('skipped (already exists)'))

        connection = connections[options['database']]
        try:
            with connection.cursor() as cursor:
                result = run_schema(statements, cursor, on_progress=report)
        except SchemaSetupError as e:
            raise CommandError(
                f'Schema setup failed: {e}\nStatement: {e.statement[:150]}'
            )

        self.stdout.write(
            self.style.SUCCESS(
                f'\nSchema setup complete: {result.executed} executed, '
                f'{len(result.skipped)} skipped.'
            )
        )


def _preview(statement):
    return statement.splitlines()[0][:60]
