"""
Request logging middleware.
"""
import logging
import time
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger('api')


class RequestLoggingMiddleware(MiddlewareMixin):
    """
    Logs every API request with its status and timing.
    """

    # Paths that are not logged
    SKIPPED_PATHS = [
        '/admin/',
        '/static/',
    ]

    def process_request(self, request):
        """Store request start time."""
        request._start_time = time.monotonic()
        return None

    def process_response(self, request, response):
        if any(request.path.startswith(path) for path in self.SKIPPED_PATHS):
            return response

        if hasattr(request, '_start_time'):
            elapsed_ms = int((time.monotonic() - request._start_time) * 1000)
        else:
            elapsed_ms = 0

        message = (
            f"{request.method} {request.path} -> {response.status_code} "
            f"({elapsed_ms}ms) from {self.get_client_ip(request)}"
        )
        if response.status_code >= 500:
            logger.error(message)
        elif response.status_code >= 400:
            logger.warning(message)
        else:
            logger.info(message)

        return response

    @staticmethod
    def get_client_ip(request):
        """Extract client IP from request"""
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            return x_forwarded_for.split(',')[0].strip()
        return request.META.get('REMOTE_ADDR')
