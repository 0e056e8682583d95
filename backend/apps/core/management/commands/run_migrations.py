# apps/core/management/commands/run_migrations.py

import logging
import os
from importlib import import_module

from django.apps import apps
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

logger = logging.getLogger(__name__)


def migration_folders():
    """
    Absolute migrations folder of every project app that ships migrations.
    """
    folders = []
    for app_name in getattr(settings, 'LOCAL_APPS', []):
        app_config = apps.get_app_config(app_name.rsplit('.', 1)[-1])
        try:
            module = import_module(f"{app_config.name}.migrations")
        except ImportError:
            continue
        folders.append(os.path.dirname(os.path.abspath(module.__file__)))
    return folders


class Command(BaseCommand):
    help = 'Apply all pending database migrations'

    def handle(self, *args, **options):
        logger.info("Running migrations...")
        for folder in migration_folders():
            logger.info(f"Migrations folder: {folder}")

        try:
            call_command('migrate', interactive=False,
                         verbosity=options.get('verbosity', 1))
        except Exception as e:
            logger.error(f"Migration failed: {e}", exc_info=True)
            raise CommandError(f"Migration failed: {e}") from e

        logger.info("Migrations completed successfully")
        self.stdout.write(self.style.SUCCESS(
            'Migrations completed successfully!'))
