"""
Tests for logging configuration.
"""
import logging

from menu_api.logging_config import setup_logging


class TestLoggingConfiguration:
    """Test logging setup and configuration."""

    def test_setup_logging_default_level(self, monkeypatch):
        """Test that setup_logging defaults to INFO level."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        assert setup_logging() == "INFO"
        assert logging.getLogger("menu_api").level == logging.INFO

    def test_setup_logging_respects_env_var(self, monkeypatch):
        """Test that LOG_LEVEL env var is respected."""
        monkeypatch.setenv("LOG_LEVEL", "warning")

        assert setup_logging() == "WARNING"
        assert logging.getLogger("menu_api").level == logging.WARNING

    def test_setup_logging_explicit_level(self):
        """Test that explicit level parameter works."""
        setup_logging(level="ERROR")
        assert logging.getLogger("menu_api").level == logging.ERROR

    def test_setup_logging_invalid_level_defaults_to_info(self):
        """Test that invalid level falls back to INFO."""
        assert setup_logging(level="INVALID_LEVEL") == "INFO"
        assert logging.getLogger("menu_api").level == logging.INFO

    def test_third_party_noise_reduced(self):
        setup_logging(level="INFO")
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


class TestServiceLogging:

    def test_writes_are_logged(self, service, item_payload, caplog):
        with caplog.at_level(logging.INFO, logger="menu_api"):
            service.create_item(item_payload)
            service.toggle_availability("cf-001")
            service.delete_item("cf-001")

        messages = [record.getMessage() for record in caplog.records]
        assert any("Created menu item" in m and "cf-001" in m for m in messages)
        assert any("is_available=False" in m for m in messages)
        assert any("Deleted menu item cf-001" in m for m in messages)


class TestServerLogging:

    def test_uvicorn_logger_follows_level(self):
        setup_logging(level="DEBUG")
        assert logging.getLogger("uvicorn").level == logging.DEBUG
        setup_logging(level="WARNING")
        assert logging.getLogger("uvicorn").level == logging.WARNING

    def test_run_hands_level_to_uvicorn(self, monkeypatch):
        import menu_api.main as main_mod

        calls = []
        monkeypatch.setattr(main_mod.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))
        monkeypatch.setattr(main_mod, "LOG_LEVEL", "WARNING")

        main_mod.run()

        assert len(calls) == 1
        assert calls[0]["log_config"] is None
        assert calls[0]["log_level"] == "warning"
        assert calls[0]["port"] == main_mod.config.PORT
