"""Viewset mixins shared by the entity editors."""

from rest_framework import status
from rest_framework.response import Response

from .exceptions import ConfirmationRequiredError

CONFIRM_VALUES = ('true', '1', 'yes')


class ConfirmedDestroyMixin:
    """
    Require ``?confirm=true`` (or ``{"confirm": true}``) on DELETE.

    Each row deletion is an explicit, confirmed action; a bare DELETE is
    refused with 400 ``confirmation_required``.
    """

    def destroy(self, request, *args, **kwargs):
        if not self.delete_confirmed(request):
            raise ConfirmationRequiredError()
        instance = self.get_object()
        self.perform_destroy(instance)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @staticmethod
    def delete_confirmed(request):
        value = request.query_params.get('confirm')
        if value is None and hasattr(request.data, 'get'):
            value = request.data.get('confirm')
        if isinstance(value, bool):
            return value
        return str(value).lower() in CONFIRM_VALUES
