import logging

from gqlschema.panics import DefaultLogger


def test_log_panic_message(caplog):
    with caplog.at_level(logging.ERROR, logger="gqlschema.panics"):
        DefaultLogger().log_panic("request-1", "boom")
    (record,) = caplog.records
    message = record.getMessage()
    assert record.levelno == logging.ERROR
    assert message.startswith("graphql: panic occurred: boom\n")
    assert message.endswith("\ncontext: request-1")


def test_log_panic_includes_traceback_of_exception(caplog):
    try:
        raise ValueError("broken resolver")
    except ValueError as exc:
        error = exc
    with caplog.at_level(logging.ERROR, logger="gqlschema.panics"):
        DefaultLogger().log_panic({"user": 1}, error)
    message = caplog.records[-1].getMessage()
    assert "graphql: panic occurred: broken resolver" in message
    assert "ValueError: broken resolver" in message
    assert "test_log_panic_includes_traceback_of_exception" in message