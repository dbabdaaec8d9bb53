"""Project-wide DRF exception handler.

Every error leaves the API as ``{"error": "<message>"}``. DRF errors keep their
status code and are reduced to their first message; anything DRF does not know
about becomes a 500 with a generic message and the cause goes to the log.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def first_error_message(data) -> str:
    """Return the first human-readable message from DRF error data."""
    if isinstance(data, dict):
        for key in ('error', 'detail'):
            if key in data:
                return first_error_message(data[key])
        for key, value in data.items():
            message = first_error_message(value)
            if key == 'non_field_errors':
                return message
            return f'{key}: {message}'
        return 'Invalid request'
    if isinstance(data, (list, tuple)):
        return first_error_message(data[0]) if data else 'Invalid request'
    return str(data)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        view = context.get('view')
        logger.error('Unhandled error in %s', view.__class__.__name__ if view else 'view', exc_info=exc)
        return Response({'error': 'Internal server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response.data = {'error': first_error_message(response.data)}
    return response
