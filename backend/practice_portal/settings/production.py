"""
Production settings - used for deployment.
"""
import dj_database_url
import logging
from .base import *

logger = logging.getLogger(__name__)

# Security - DEBUG defaults to False, can be enabled via environment variable if needed
DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'

# Format: comma-separated list of allowed hosts (e.g., "example.com,www.example.com")
_allowed_hosts = os.environ.get('ALLOWED_HOSTS', '')
if _allowed_hosts and _allowed_hosts.strip():
    ALLOWED_HOSTS = [host.strip()
                     for host in _allowed_hosts.split(',') if host.strip()]
else:
    ALLOWED_HOSTS = []
    logger.warning(
        "ALLOWED_HOSTS environment variable not set! "
        "All requests will be rejected."
    )

# Database - use DATABASE_URL from environment
DATABASES = {
    'default': dj_database_url.config(
        default=os.environ.get('DATABASE_URL'),
        conn_max_age=600,
        conn_health_checks=True,
    )
}

# Security settings
# SSL is terminated at the proxy, which forwards requests as HTTP internally
SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

# Format: comma-separated list of allowed origins (e.g., "https://app.example.com")
_cors_origins = os.environ.get('CORS_ALLOWED_ORIGINS', '')
if _cors_origins and _cors_origins.strip():
    CORS_ALLOWED_ORIGINS = [origin.strip()
                            for origin in _cors_origins.split(',') if origin.strip()]
else:
    # SECURITY: If not set, use empty list (blocks all origins)
    CORS_ALLOWED_ORIGINS = []
    logger.warning(
        "CORS_ALLOWED_ORIGINS environment variable not set! "
        "All cross-origin requests will be blocked. "
        "Set CORS_ALLOWED_ORIGINS to a comma-separated list of allowed origins."
    )

CORS_ALLOW_CREDENTIALS = True

# WhiteNoise for serving static files
MIDDLEWARE.insert(1, 'whitenoise.middleware.WhiteNoiseMiddleware')
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# Configure logging to show INFO level messages
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'practice_portal': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'django.request': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}

# Stripe: without a publishable key the payment modal never mounts its form
if not STRIPE_PUBLISHABLE_KEY.startswith('pk_'):
    logger.warning(
        "STRIPE_PUBLISHABLE_KEY is not a publishable key (pk_...). "
        "Payments are disabled until it is set."
    )
if not STRIPE_SECRET_KEY:
    logger.warning("STRIPE_SECRET_KEY not set. Payment status checks will fail.")
