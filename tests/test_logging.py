"""Tests for JSON log formatting and configuration."""

import json
import logging
import sys

from verifiable.core.logging import JsonFormatter, configure_logging


def make_record(msg="hello", level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="verifiable.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_base_fields(self):
        """Every line carries timestamp, level, logger and message."""
        payload = json.loads(JsonFormatter().format(make_record()))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "verifiable.test"
        assert payload["msg"] == "hello"
        assert "ts" in payload

    def test_known_extras_copied(self):
        """Credential and schema extras are included."""
        record = make_record(
            credential_id="http://example.edu/credentials/1872",
            schema_url="https://example.org/schemas/a.json",
            schema_type="JsonSchemaValidator2018",
        )

        payload = json.loads(JsonFormatter().format(record))

        assert payload["credential_id"] == "http://example.edu/credentials/1872"
        assert payload["schema_url"] == "https://example.org/schemas/a.json"
        assert payload["schema_type"] == "JsonSchemaValidator2018"

    def test_unknown_extras_ignored(self):
        """Arbitrary record attributes stay out of the payload."""
        payload = json.loads(JsonFormatter().format(make_record(secret="x")))
        assert "secret" not in payload

    def test_exception_info(self):
        """Exceptions are rendered into exc_info."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        payload = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in payload["exc_info"]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level_and_handler(self, restore_logging):
        """The root logger gets the level and a JSON stderr handler."""
        configure_logging(log_level="debug")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_level_from_env(self, restore_logging, monkeypatch):
        """VERIFIABLE_LOG_LEVEL is used when no level is given."""
        monkeypatch.setenv("VERIFIABLE_LOG_LEVEL", "ERROR")
        configure_logging()
        assert logging.getLogger().level == logging.ERROR

    def test_unknown_level_falls_back_to_info(self, restore_logging):
        """Unrecognised level names mean INFO."""
        configure_logging(log_level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_log_file(self, restore_logging, tmp_path):
        """A log file receives JSON lines too."""
        log_file = tmp_path / "verifiable.log"
        configure_logging(log_file=str(log_file), log_level="INFO")

        logging.getLogger("verifiable.test").info("written", extra={"schema_type": "X"})
        for handler in logging.getLogger().handlers:
            handler.flush()

        line = log_file.read_text().strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["msg"] == "written"
        assert payload["schema_type"] == "X"
