"""
WSGI config for practice_portal project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE',
                      'practice_portal.settings.production')

application = get_wsgi_application()
