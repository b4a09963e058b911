import logging

from src.utils.logging import StructuredFormatter, get_logger, setup_logging
from src.utils.security import REDACTED, SanitizingFormatter, redact


def make_record(msg, *args):
    return logging.LogRecord(
        name="bridge_adapter.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )


def test_redact_authorization_values():
    text = redact("headers: Basic a2MtdXNlcjprYy1wYXNz and Bearer eyJhbGciOi.x.y")

    assert "a2MtdXNlcjprYy1wYXNz" not in text
    assert "eyJhbGciOi" not in text
    assert text.count(REDACTED) == 2


def test_redact_password_form_field():
    text = redact("username=u&password=hunter2&grant_type=password")

    assert "hunter2" not in text
    assert "grant_type=password" in text


def test_sanitizing_formatter_applies_args():
    formatter = SanitizingFormatter("%(message)s")

    output = formatter.format(make_record("token %s", "Bearer secret-value"))

    assert output == f"token Bearer {REDACTED}"


def test_structured_formatter_redacts_without_touching_original():
    record = make_record("Authorization: %s", "Bearer secret-value")

    output = StructuredFormatter().format(record)

    assert "secret-value" not in output
    assert "'level': 'INFO'" in output
    assert record.getMessage() == "Authorization: Bearer secret-value"


def test_get_logger_namespaces_under_adapter():
    assert get_logger("resolver").name == "bridge_adapter.resolver"


def test_setup_logging_writes_sanitized_simple_format_to_file(tmp_path):
    log_file = tmp_path / "logs" / "adapter.log"
    logger = setup_logging(level="INFO", log_file=log_file, log_format="simple")

    try:
        get_logger("test").info("sending Authorization: Bearer top-secret")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "INFO" in content
        assert f"Bearer {REDACTED}" in content
        assert "top-secret" not in content
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    finally:
        for handler in logger.handlers:
            handler.close()
        setup_logging(level="INFO")
