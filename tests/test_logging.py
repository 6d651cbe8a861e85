"""Tests for logging setup."""

from loguru import logger

from addressify.config import Settings
from addressify.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""

    def teardown_method(self):
        logger.remove()

    def test_writes_to_configured_file(self, tmp_path):
        log_file = tmp_path / "nested" / "addressify.log"

        setup_logging(Settings(log_level="DEBUG", log_file=str(log_file)))
        logger.debug("lookup finished")
        logger.remove()

        content = log_file.read_text()
        assert f"Logging to stderr and {log_file} at level DEBUG" in content
        assert "lookup finished" in content

    def test_no_file_sink_without_log_file(self, tmp_path, monkeypatch):
        """Test the default settings create no log directory in the working directory."""
        monkeypatch.chdir(tmp_path)

        setup_logging(Settings(log_file=""))
        logger.info("lookup finished")

        assert list(tmp_path.iterdir()) == []

    def test_verbose_overrides_configured_level(self, tmp_path):
        log_file = tmp_path / "addressify.log"

        setup_logging(Settings(log_level="WARNING", log_file=str(log_file)), verbose=True)
        logger.debug("candidate details")
        logger.remove()

        assert "candidate details" in log_file.read_text()

    def test_configured_level_filters_file(self, tmp_path):
        log_file = tmp_path / "addressify.log"

        setup_logging(Settings(log_level="warning", log_file=str(log_file)))
        logger.info("routine")
        logger.warning("provider slow")
        logger.remove()

        content = log_file.read_text()
        assert "routine" not in content
        assert "provider slow" in content
