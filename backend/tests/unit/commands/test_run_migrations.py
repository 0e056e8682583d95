"""
Tests for the run_migrations command and the migration console script.
"""
import os
from io import StringIO
from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.core.management.commands.run_migrations import migration_folders
from practice_portal import migrate

COMMAND_CALL = 'apps.core.management.commands.run_migrations.call_command'


class TestMigrationFolders:

    def test_lists_project_migration_dirs(self):
        folders = migration_folders()

        assert any(folder.endswith(os.path.join('core', 'migrations')) for folder in folders)
        assert all(os.path.isabs(folder) for folder in folders)

    def test_skips_apps_without_migrations(self):
        folders = migration_folders()

        assert not any(folder.endswith(os.path.join('ui', 'migrations')) for folder in folders)


class TestRunMigrationsCommand:

    def test_success(self):
        out = StringIO()

        with patch(COMMAND_CALL) as mock_call:
            call_command('run_migrations', stdout=out)

        mock_call.assert_called_once_with('migrate', interactive=False, verbosity=1)
        assert 'Migrations completed successfully!' in out.getvalue()

    def test_failure_raises_command_error(self):
        with patch(COMMAND_CALL, side_effect=RuntimeError('database is locked')):
            with pytest.raises(CommandError) as exc_info:
                call_command('run_migrations', stdout=StringIO())

        assert 'database is locked' in str(exc_info.value)

    def test_logs_folders(self, caplog):
        caplog.set_level('INFO', logger='apps.core.management.commands.run_migrations')

        with patch(COMMAND_CALL):
            call_command('run_migrations', stdout=StringIO())

        assert 'Running migrations...' in caplog.text
        assert 'Migrations folder:' in caplog.text


class TestMigrateEntryPoint:

    def test_exit_zero_on_success(self):
        with patch(COMMAND_CALL):
            assert migrate.main() == 0

    def test_exit_one_on_failure(self):
        with patch(COMMAND_CALL, side_effect=RuntimeError('connection refused')):
            assert migrate.main() == 1

    def test_exit_one_when_setup_fails(self):
        with patch('django.setup', side_effect=RuntimeError('bad settings')):
            assert migrate.main() == 1
