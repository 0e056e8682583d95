"""
Django app configuration for ui.
"""
from django.apps import AppConfig


class UiConfig(AppConfig):
    """Presentation helpers and the `ui` template library."""
    name = 'apps.ui'
    verbose_name = 'UI'
