"""Tests for the structured logging setup."""

import io
import json
import logging

import pytest

from entitygen.core.types import BatchEntry
from entitygen.logging import (
    JSONFormatter,
    LogContext,
    TextFormatter,
    configure_logging,
    get_logger,
    with_log_context,
)
from entitygen.logging.context import get_log_context


def _record(msg: str = "Rendering", **extra) -> logging.LogRecord:
    record = logging.LogRecord("entitygen.codegen", logging.INFO, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    """Tests for JSONFormatter and TextFormatter."""

    def test_json_context_fields(self):
        output = JSONFormatter().format(_record(interface="com.example.Person", fields=3))

        data = json.loads(output)
        assert data["level"] == "INFO"
        assert data["logger"] == "entitygen.codegen"
        assert data["message"] == "Rendering"
        assert data["interface"] == "com.example.Person"
        assert data["extra"] == {"fields": 3}

    def test_json_without_extra(self):
        output = JSONFormatter(include_extra=False).format(_record(fields=3))

        assert "extra" not in json.loads(output)

    def test_text_context(self):
        output = TextFormatter(use_colors=False).format(
            _record(interface="com.example.Person", artifact="com.example.PersonImpl")
        )

        assert "INFO     entitygen.codegen" in output
        assert "[interface=com.example.Person, artifact=com.example.PersonImpl]" in output
        assert output.endswith(": Rendering")


class TestLogContext:
    """Tests for log context propagation."""

    def test_scoped_context(self):
        with with_log_context(interface="A"):
            with with_log_context(template="entity.java.j2"):
                assert get_log_context() == {"interface": "A", "template": "entity.java.j2"}
            assert get_log_context() == {"interface": "A"}
        assert get_log_context() == {}

    def test_log_context_object(self):
        context = LogContext(interface="A", extra={"pass": 2})

        assert context.to_dict() == {"interface": "A", "pass": 2}

    def test_context_for_entry(self, person_entry):
        context = LogContext.for_entry(person_entry)

        assert context.to_dict() == {"interface": "com.example.Person", "source": "Person.java"}

    def test_context_for_default_package_entry(self):
        entry = BatchEntry(interface_name="Thing")

        assert LogContext.for_entry(entry).to_dict() == {"interface": "Thing"}


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output_includes_context(self):
        stream = io.StringIO()
        configure_logging(level="DEBUG", format="json", output=stream)

        with with_log_context(interface="com.example.Person"):
            get_logger("entitygen.test").info("Artifact written", artifact="com.example.PersonImpl")

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "Artifact written"
        assert data["interface"] == "com.example.Person"
        assert data["artifact"] == "com.example.PersonImpl"

    def test_level_filtering(self):
        stream = io.StringIO()
        configure_logging(level="WARNING", format="text", output=stream, use_colors=False)

        logger = get_logger("entitygen.test")
        logger.info("quiet")
        logger.warning("loud")

        assert "quiet" not in stream.getvalue()
        assert "loud" in stream.getvalue()
        assert not logger.is_enabled_for(logging.INFO)

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            configure_logging(level="CHATTY")
