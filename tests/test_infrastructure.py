"""Tests for infrastructure: logging setup and settings."""
import logging
import logging.handlers

import pytest
from pydantic import ValidationError

from winners.logging_config import setup_logging
from winners.settings import Settings


@pytest.fixture
def root_logger():
    """Root logger whose handlers and level are restored afterwards."""
    root = logging.getLogger()
    original_handlers = root.handlers.copy()
    original_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers = original_handlers
    root.setLevel(original_level)


# =============================================================================
# Logging configuration tests
# =============================================================================


class TestLoggingConfig:
    """Test logging setup."""

    def test_setup_logging_configures_root_logger(self, root_logger):
        """setup_logging should add a console handler to the root logger."""
        root_logger.handlers.clear()
        setup_logging(level="INFO")
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], logging.StreamHandler)
        assert root_logger.level == logging.INFO

    def test_setup_logging_idempotent(self, root_logger):
        """Calling setup_logging twice should not add duplicate handlers."""
        root_logger.handlers.clear()
        setup_logging(level="INFO")
        count_after_first = len(root_logger.handlers)
        setup_logging(level="DEBUG")
        assert len(root_logger.handlers) == count_after_first
        assert root_logger.level == logging.INFO

    def test_setup_logging_with_file(self, root_logger, tmp_path):
        """setup_logging with log_file should add a rotating file handler."""
        root_logger.handlers.clear()
        log_file = tmp_path / "logs" / "winners.log"
        setup_logging(level="DEBUG", log_file=str(log_file))

        assert any(
            isinstance(h, logging.handlers.RotatingFileHandler)
            for h in root_logger.handlers
        )
        assert log_file.parent.is_dir()

    def test_unknown_level_falls_back_to_info(self, root_logger):
        root_logger.handlers.clear()
        setup_logging(level="chatty")
        assert root_logger.level == logging.INFO

    def test_level_and_file_from_settings(self, root_logger, tmp_path):
        """Without arguments the level and log file come from Settings."""
        root_logger.handlers.clear()
        log_file = tmp_path / "from_settings.log"
        config = Settings(_env_file=None, log_level="DEBUG", log_file=str(log_file))

        package_logger = setup_logging(config)

        assert package_logger.name == "winners"
        assert root_logger.level == logging.DEBUG
        assert any(
            isinstance(h, logging.handlers.RotatingFileHandler)
            and h.baseFilename == str(log_file)
            for h in root_logger.handlers
        )

    def test_arguments_override_settings(self, root_logger):
        root_logger.handlers.clear()
        config = Settings(_env_file=None, log_level="DEBUG")
        setup_logging(config, level="WARNING")
        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1


# =============================================================================
# Settings tests
# =============================================================================


class TestSettings:
    """Test settings loading and validation."""

    def test_defaults(self, monkeypatch):
        for name in ("CHUNK_SIZE", "MAX_WORKERS", "COMBINE_STRATEGY", "LOG_LEVEL", "LOG_FILE"):
            monkeypatch.delenv(f"WINNERS_{name}", raising=False)

        s = Settings(_env_file=None)
        assert s.chunk_size == 2
        assert s.max_workers is None
        assert s.combine_strategy == "tree"
        assert s.log_level == "INFO"
        assert s.ratings_path.name == "ratings.yaml"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("WINNERS_CHUNK_SIZE", "5")
        monkeypatch.setenv("WINNERS_COMBINE_STRATEGY", "pairwise")
        monkeypatch.setenv("WINNERS_MAX_WORKERS", "3")

        s = Settings(_env_file=None)
        assert s.chunk_size == 5
        assert s.combine_strategy == "pairwise"
        assert s.max_workers == 3

    def test_rejects_non_positive_chunk_size(self, monkeypatch):
        monkeypatch.setenv("WINNERS_CHUNK_SIZE", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_rejects_unknown_strategy(self, monkeypatch):
        monkeypatch.setenv("WINNERS_COMBINE_STRATEGY", "random")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_sample_ratings_file_exists(self):
        assert Settings(_env_file=None).ratings_path.is_file()
