"""
DRF exception handler that maps database failures onto store errors.

Views and viewsets that touch the ORM directly (list/retrieve querysets,
serializer saves) do not wrap every query in ``store_call``; any
``DatabaseError`` escaping them is translated here the same way.
"""

import logging

from django.db import DatabaseError
from rest_framework.views import exception_handler

from .exceptions import StoreError, SchemaMissingError
from .store import is_schema_missing

logger = logging.getLogger(__name__)


def store_exception_handler(exc, context):
    if isinstance(exc, DatabaseError):
        view = context.get('view')
        logger.error(
            'Store error in %s: %s', view.__class__.__name__ if view else 'view', exc
        )
        exc = SchemaMissingError() if is_schema_missing(exc) else StoreError(str(exc))

    response = exception_handler(exc, context)

    if response is not None and isinstance(exc, SchemaMissingError):
        response.data['setup_required'] = True

    return response
