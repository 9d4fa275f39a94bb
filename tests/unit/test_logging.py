"""Unit tests for Registrar logging configuration."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from registrar.accounts.passwords import hash_password
from registrar.config import LoggingConfig, Settings
from registrar.logging import CredentialFilter, sanitize_for_log, setup_logging


def make_settings(root: Path, **logging_options) -> Settings:
    """Settings rooted at a temp dir with console logging off."""
    options = {"console": False, **logging_options}
    return Settings(logging=LoggingConfig(**options), root_path=root)


@pytest.fixture(autouse=True)
def reset_registrar_logger():
    """Close handlers so temp log files can be removed."""
    yield
    logger = logging.getLogger("registrar")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_log_dir_relative_to_config_root(self, tmp_path: Path) -> None:
        """A relative log dir is created under the config directory."""
        setup_logging(make_settings(tmp_path, dir="nested/logs"))

        assert (tmp_path / "nested" / "logs" / "registrar.log").exists()

    def test_custom_file_name(self, tmp_path: Path) -> None:
        """The log file name comes from logging.file."""
        setup_logging(make_settings(tmp_path, file="registrar-api.log"))

        assert (tmp_path / "logs" / "registrar-api.log").exists()
        assert not (tmp_path / "logs" / "registrar.log").exists()

    def test_absolute_log_dir(self, tmp_path: Path) -> None:
        """An absolute log dir ignores the config root."""
        log_dir = tmp_path / "abs"
        setup_logging(make_settings(tmp_path / "conf", dir=str(log_dir)))

        assert (log_dir / "registrar.log").exists()

    def test_writes_to_log_file(self, tmp_path: Path) -> None:
        """Log messages are written to the file."""
        logger = setup_logging(make_settings(tmp_path))
        logger.info("test message 123")

        content = (tmp_path / "logs" / "registrar.log").read_text()
        assert "test message 123" in content
        assert " | INFO" in content
        assert " | registrar | " in content

    def test_components_write_to_same_file(self, tmp_path: Path) -> None:
        """Component loggers share the registrar log file."""
        setup_logging(make_settings(tmp_path))

        logging.getLogger("registrar.catalog.catalog").info("catalog log")
        logging.getLogger("registrar.registration.engine").info("engine log")

        content = (tmp_path / "logs" / "registrar.log").read_text()
        assert "registrar.catalog.catalog | catalog log" in content
        assert "registrar.registration.engine | engine log" in content

    def test_log_level_configurable(self, tmp_path: Path) -> None:
        """Log level filters messages appropriately."""
        setup_logging(make_settings(tmp_path, level="WARNING"))
        logger = logging.getLogger("registrar")
        logger.info("should not appear")
        logger.warning("should appear")

        content = (tmp_path / "logs" / "registrar.log").read_text()
        assert "should not appear" not in content
        assert "should appear" in content

    def test_level_from_env_through_settings(self, tmp_path: Path) -> None:
        """REGISTRAR_LOG_LEVEL reaches the logger via Settings.apply_env."""
        settings = make_settings(tmp_path).apply_env({"REGISTRAR_LOG_LEVEL": "DEBUG"})

        logger = setup_logging(settings)

        assert logger.level == logging.DEBUG

    def test_no_duplicate_handlers_on_repeated_setup(self, tmp_path: Path) -> None:
        """Repeated setup_logging calls don't add duplicate handlers."""
        setup_logging(make_settings(tmp_path))
        setup_logging(make_settings(tmp_path))

        assert len(logging.getLogger("registrar").handlers) == 1

    def test_console_handler_added(self, tmp_path: Path) -> None:
        """console=True adds a stream handler next to the file."""
        setup_logging(make_settings(tmp_path, console=True))

        assert len(logging.getLogger("registrar").handlers) == 2

    def test_rotation_configured(self, tmp_path: Path) -> None:
        """RotatingFileHandler is configured with the given limits."""
        setup_logging(make_settings(tmp_path, max_bytes=1024, backup_count=3))

        handler = logging.getLogger("registrar").handlers[0]
        assert isinstance(handler, RotatingFileHandler)
        assert handler.maxBytes == 1024
        assert handler.backupCount == 3

    def test_handlers_redact_credentials(self, tmp_path: Path) -> None:
        """Every handler carries the credential filter."""
        setup_logging(make_settings(tmp_path))

        logging.getLogger("registrar.seed").info("Loading %s", {"password": "hunter2"})

        content = (tmp_path / "logs" / "registrar.log").read_text()
        assert "hunter2" not in content
        assert "[REDACTED]" in content
        for handler in logging.getLogger("registrar").handlers:
            assert any(isinstance(f, CredentialFilter) for f in handler.filters)


@pytest.mark.unit
class TestCredentialFilter:
    """Tests for CredentialFilter."""

    def make_record(self, msg: str, *args: object) -> logging.LogRecord:
        return logging.LogRecord("registrar", logging.INFO, __file__, 1, msg, args, None)

    def test_rewrites_record_with_credentials(self) -> None:
        record = self.make_record("login password=%s", "hunter2")

        assert CredentialFilter().filter(record) is True
        assert record.getMessage() == "login password=[REDACTED]"
        assert record.args is None

    def test_leaves_clean_record_alone(self) -> None:
        record = self.make_record("Registered %s", "alice")

        CredentialFilter().filter(record)

        assert record.msg == "Registered %s"
        assert record.args == ("alice",)


@pytest.mark.unit
class TestSanitizeForLog:
    """Tests for sanitize_for_log function."""

    def test_redacts_password(self) -> None:
        result = sanitize_for_log("{'username': 'alice', 'password': 'hunter2'}")
        assert "hunter2" not in result
        assert "[REDACTED]" in result
        assert "alice" in result

    def test_redacts_password_hash_field(self) -> None:
        result = sanitize_for_log("password_hash=abc123")
        assert "abc123" not in result

    def test_redacts_bare_bcrypt_hash(self) -> None:
        hashed = hash_password("hunter2")
        result = sanitize_for_log(f"stored {hashed} for alice")
        assert hashed not in result
        assert result == "stored [REDACTED] for alice"

    def test_plain_text_unchanged(self) -> None:
        assert sanitize_for_log("Registered alice in CSCI-101") == "Registered alice in CSCI-101"
