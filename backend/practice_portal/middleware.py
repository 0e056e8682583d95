"""
Request logging for the portal.
"""
import logging
import time

from django.conf import settings

logger = logging.getLogger('practice_portal.requests')

SKIPPED_PREFIXES = ('/static/', '/health')


def _describe_user(request) -> str:
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return 'anonymous'
    return f"{user.email} ({getattr(user, 'role', 'unknown')})"


class RequestLoggingMiddleware:
    """
    Logs one line per request with the status, timing and who made it.
    Turned on with REQUEST_LOGGING_ENABLED; static files are never logged.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.enabled = getattr(settings, 'REQUEST_LOGGING_ENABLED', False)
        self.level = logging.getLevelName(
            getattr(settings, 'REQUEST_LOGGING_LEVEL', 'INFO'))

    def __call__(self, request):
        if not self.enabled or request.path.startswith(SKIPPED_PREFIXES):
            return self.get_response(request)

        started = time.monotonic()
        try:
            response = self.get_response(request)
        except Exception:
            logger.exception(
                f"{request.method} {request.path} failed for {_describe_user(request)}")
            raise

        elapsed_ms = (time.monotonic() - started) * 1000
        logger.log(
            self.level,
            f"{request.method} {request.path} -> {response.status_code} "
            f"in {elapsed_ms:.0f}ms [{_describe_user(request)}]"
        )
        return response
