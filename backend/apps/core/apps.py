"""
Django app configuration for core.
"""
from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Users, authentication state and the access gate."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    verbose_name = 'Core'
