"""
Store exceptions shared by every app.

Exception Hierarchy:
    StoreError (APIException, 503)
    └── SchemaMissingError
    ConfirmationRequiredError (APIException, 400)
    SchemaSetupError (plain Exception, raised by the setup command)
"""
from rest_framework.exceptions import APIException


SETUP_REQUIRED_MESSAGE = (
    'Database tables not found. Run `python manage.py migrate` '
    '(or `python manage.py setup_schema` against the hosted database) '
    'and reload.'
)


class StoreError(APIException):
    """A query against the record store failed."""
    status_code = 503
    default_detail = 'The record store could not complete the request.'
    default_code = 'store_error'


class SchemaMissingError(StoreError):
    """The store answered, but the tables this app needs do not exist."""
    default_detail = SETUP_REQUIRED_MESSAGE
    default_code = 'schema_missing'


class SchemaSetupError(Exception):
    """A schema statement failed with something other than 'already exists'."""

    def __init__(self, message, statement=''):
        super().__init__(message)
        self.statement = statement


class ConfirmationRequiredError(APIException):
    """A destructive action was requested without explicit confirmation."""
    status_code = 400
    default_detail = 'This action must be confirmed with confirm=true.'
    default_code = 'confirmation_required'
