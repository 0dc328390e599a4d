from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = 'Internal server error'


def _first_message(value) -> str | None:
    if isinstance(value, dict):
        for item in value.values():
            msg = _first_message(item)
            if msg:
                return msg
        return None
    if isinstance(value, (list, tuple)):
        for item in value:
            msg = _first_message(item)
            if msg:
                return msg
        return None
    if value in (None, ''):
        return None
    return str(value)


def api_exception_handler(exc, context):
    """Render every API error as ``{"message": ...}``.

    DRF exceptions keep their status code; field-level validation errors are
    also returned under ``errors``. Anything DRF does not recognise is logged
    and turned into a 500 with a generic message.
    """
    response = exception_handler(exc, context)
    if response is None:
        view = context.get('view')
        logger.error(
            'Unhandled error in %s', view.__class__.__name__ if view else 'view',
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return Response({'message': GENERIC_ERROR_MESSAGE}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    data = response.data
    if isinstance(data, dict) and set(data.keys()) == {'detail'}:
        response.data = {'message': _first_message(data['detail']) or ''}
    elif isinstance(data, dict):
        response.data = {'message': _first_message(data) or 'Invalid request', 'errors': data}
    else:
        response.data = {'message': _first_message(data) or 'Invalid request'}
    return response
