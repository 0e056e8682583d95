"""
Out-of-band migration entry point.

Installed as the ``practice-portal-migrate`` console script. Takes no
arguments; exits 0 when every pending migration applied and 1 on any error.
"""
import logging
import os
import sys

logger = logging.getLogger(__name__)


def main() -> int:
    os.environ.setdefault('DJANGO_SETTINGS_MODULE',
                          'practice_portal.settings.production')

    import django
    from django.core.management import call_command
    from django.core.management.base import CommandError

    try:
        django.setup()
        call_command('run_migrations')
    except CommandError:
        # Already logged by the command
        return 1
    except Exception as e:
        logger.error(f"Migration failed: {e}", exc_info=True)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
