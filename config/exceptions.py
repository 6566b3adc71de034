import logging

from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    400: 'Bad Request',
    401: 'Authentication Required',
    403: 'Permission Denied',
    404: 'Not Found',
    405: 'Method Not Allowed',
    500: 'Internal Server Error',
}


def custom_exception_handler(exc, context):
    """
    Wrap DRF errors in the same success/error envelope the content API uses.
    """
    response = exception_handler(exc, context)

    if response is not None:
        view = context.get('view')
        logger.warning(
            "API error %s in %s: %s",
            response.status_code, view.__class__.__name__ if view else '-', exc,
        )
        response.data = {
            'success': False,
            'error': {
                'status_code': response.status_code,
                'message': get_error_message(response),
                'details': response.data if isinstance(response.data, dict) else {'error': response.data},
            },
        }
        if response.status_code == 404:
            response.data['not_found'] = True

    return response


def get_error_message(response):
    """Get a human-readable error message."""
    return ERROR_MESSAGES.get(response.status_code, 'An error occurred')
