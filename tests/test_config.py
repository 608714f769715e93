import importlib
import os
from pathlib import Path
from unittest.mock import patch

import pytest

import applog.config

#
# logger defaults from the environment
#


class TestLoggerConfig:

    def teardown_method(self):
        """Reload with the restored environment."""
        importlib.reload(applog.config)

    def test_driver_default_file(self):
        """Test the default driver is file."""
        with patch.dict(os.environ, {}, clear=True):
            importlib.reload(applog.config)
            assert applog.config.logger.driver == 'file'

    def test_driver_from_environment(self):
        """Test driver from CONFIG_LOGGER_DRIVER."""
        with patch.dict(os.environ, {'CONFIG_LOGGER_DRIVER': 'console'}):
            importlib.reload(applog.config)
            assert applog.config.logger.driver == 'console'

    def test_level_default_info(self):
        """Test the default level is info."""
        with patch.dict(os.environ, {}, clear=True):
            importlib.reload(applog.config)
            assert applog.config.logger.level == 'info'

    def test_level_from_environment_lowercased(self):
        """Test level from CONFIG_LOGGER_LEVEL is lowercased."""
        with patch.dict(os.environ, {'CONFIG_LOGGER_LEVEL': 'DEBUG'}):
            importlib.reload(applog.config)
            assert applog.config.logger.level == 'debug'

    def test_dir_none_when_not_set(self):
        """Test log dir is None when not set."""
        with patch.dict(os.environ, {}, clear=True):
            importlib.reload(applog.config)
            assert applog.config.logger.dir is None

    def test_dir_from_environment(self, tmp_path):
        """Test log dir from CONFIG_LOGGER_DIR."""
        with patch.dict(os.environ, {'CONFIG_LOGGER_DIR': str(tmp_path / 'logdir')}):
            importlib.reload(applog.config)
            assert 'logdir' in str(applog.config.logger.dir)


class TestEnvironmentDrivesDrivers:

    def teardown_method(self):
        importlib.reload(applog.config)

    def test_level_seeds_driver_threshold(self, config, helpers):
        """Test CONFIG_LOGGER_LEVEL becomes the built-in default threshold."""
        from applog.drivers import FileDriver
        with patch.dict(os.environ, {'CONFIG_LOGGER_LEVEL': 'warning'}):
            importlib.reload(applog.config)
            assert FileDriver(config, helpers).level == 'warning'

    def test_dir_moves_logs_path(self, helpers, tmp_path):
        """Test CONFIG_LOGGER_DIR overrides the logs directory."""
        with patch.dict(os.environ, {'CONFIG_LOGGER_DIR': str(tmp_path / 'elsewhere')}):
            importlib.reload(applog.config)
            assert Path(helpers.logs_path()).name == 'elsewhere'


#
# HERE constant tests
#


class TestHereConstant:

    def test_here_is_path(self):
        """Test HERE is a resolved Path."""
        assert isinstance(applog.config.HERE, Path)
        assert applog.config.HERE.is_absolute()

    def test_here_exists(self):
        """Test HERE points to existing directory."""
        assert applog.config.HERE.exists()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
