import logging

from now_client.core.logging import LogfmtFormatter, setup_logging


def _record(msg, **extra):
    record = logging.LogRecord("now_client.client", logging.DEBUG, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_logfmt_includes_known_extras():
    line = LogfmtFormatter().format(
        _record("now.request", method="GET", path="/now/secrets", status=200)
    )
    assert line == (
        "level=debug logger=now_client.client event=now.request "
        "method=GET path=/now/secrets status=200"
    )


def test_logfmt_quotes_values_with_spaces():
    line = LogfmtFormatter().format(_record("no token found"))
    assert 'event="no token found"' in line


def test_setup_logging_is_idempotent():
    setup_logging("debug")
    setup_logging("debug")
    log = logging.getLogger("now_client")
    assert len(log.handlers) == 1
    assert isinstance(log.handlers[0].formatter, LogfmtFormatter)
    assert log.level == logging.DEBUG
    log.removeHandler(log.handlers[0])
    log.setLevel(logging.NOTSET)
