"""
Domain error to HTTP response mapping.
Installed as REST_FRAMEWORK['EXCEPTION_HANDLER'].
"""
import logging
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler
from apps.orders.services.state_machine import TransitionError

logger = logging.getLogger('api')


class ResourceNotFound(Exception):
    """A resource looked up by id does not exist."""
    resource = 'resource'

    def __init__(self, resource_id):
        self.resource_id = resource_id
        super().__init__(f"Could not find {self.resource} {resource_id}")


# error kind -> (HTTP status, logref)
ERROR_RESPONSES = [
    (TransitionError, status.HTTP_405_METHOD_NOT_ALLOWED, 'Method not allowed'),
    (ResourceNotFound, status.HTTP_404_NOT_FOUND, 'Not found'),
]


def api_exception_handler(exc, context):
    """
    Render domain errors as {"logref", "message"} bodies.
    Anything else falls through to DRF's default handler.
    """
    if isinstance(exc, TransitionError):
        logger.warning(
            f"Rejected {exc.action.value} on order {exc.order_id} "
            f"in status {exc.current_status.value}"
        )

    for error_class, status_code, logref in ERROR_RESPONSES:
        if isinstance(exc, error_class):
            return Response(
                {'logref': logref, 'message': str(exc)},
                status=status_code
            )

    return exception_handler(exc, context)
