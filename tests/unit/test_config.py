import logging

import pytest

from bionic_reading.config import Settings, get_logger, get_settings, setup_logging


class TestSettings:
    def test_default_values(self, clean_env):
        """Test default configuration values"""
        settings = Settings()

        assert settings.api_key is None
        assert settings.base_url == "https://bionic-reading1.p.rapidapi.com"
        assert settings.log_level == "INFO"
        assert settings.debug is False

    def test_env_overrides(self, clean_env):
        clean_env.setenv("BIONIC_READING_API_KEY", "env-secret")
        clean_env.setenv("BIONIC_READING_BASE_URL", "http://localhost:9000")
        clean_env.setenv("BIONIC_READING_LOG_LEVEL", "DEBUG")
        clean_env.setenv("BIONIC_READING_DEBUG", "true")

        settings = get_settings()

        assert settings.api_key.get_secret_value() == "env-secret"
        assert settings.base_url == "http://localhost:9000"
        assert settings.log_level == "DEBUG"
        assert settings.debug is True

    def test_api_key_is_masked(self, clean_env):
        clean_env.setenv("BIONIC_READING_API_KEY", "env-secret")

        settings = get_settings()

        assert "env-secret" not in repr(settings)
        assert "env-secret" not in str(settings)


class TestLogging:
    def test_get_logger_namespace(self):
        assert get_logger("builder").name == "bionic_reading.builder"

    def test_setup_logging_sets_level(self, package_logger):
        setup_logging("debug")

        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_setup_logging_is_idempotent(self, clean_env, package_logger):
        setup_logging()
        setup_logging("WARNING")

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING

    def test_unknown_level_defaults_to_info(self, package_logger):
        setup_logging("chatty")

        assert package_logger.level == logging.INFO

    def test_setup_logging_reads_log_level(self, clean_env, package_logger):
        clean_env.setenv("BIONIC_READING_LOG_LEVEL", "DEBUG")

        setup_logging()

        assert package_logger.level == logging.DEBUG

    def test_setup_logging_debug_flag(self, clean_env, package_logger):
        clean_env.setenv("BIONIC_READING_LOG_LEVEL", "ERROR")
        clean_env.setenv("BIONIC_READING_DEBUG", "true")

        setup_logging()

        assert package_logger.level == logging.DEBUG

    def test_setup_logging_default_level(self, clean_env, package_logger):
        setup_logging()

        assert package_logger.level == logging.INFO


class TestEffectiveLogLevel:
    @pytest.mark.parametrize(
        "log_level,debug,expected",
        [
            ("INFO", False, "INFO"),
            ("WARNING", False, "WARNING"),
            ("WARNING", True, "DEBUG"),
        ],
    )
    def test_effective_log_level(self, clean_env, log_level, debug, expected):
        settings = Settings(log_level=log_level, debug=debug)

        assert settings.effective_log_level == expected
