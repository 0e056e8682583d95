"""
ASGI config for practice_portal project.
"""

import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE',
                      'practice_portal.settings.production')

from django.core.asgi import get_asgi_application  # noqa: E402

django_asgi_app = get_asgi_application()


class HealthCheckMiddleware:
    """
    ASGI middleware to answer health checks before Django is involved.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope.get("path") == "/health":
            await send({
                "type": "http.response.start",
                "status": 200,
                "headers": [[b"content-type", b"text/plain"]],
            })
            await send({
                "type": "http.response.body",
                "body": b"OK",
            })
            return

        await self.app(scope, receive, send)


application = HealthCheckMiddleware(django_asgi_app)
