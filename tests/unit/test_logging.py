import logging

from rich.logging import RichHandler

from helperkit.logging import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)


def _record(name):
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


def test_prefix_filter():
    prefix_filter = ThirdPartyPrefixFilter()

    own = _record("helperkit.adapters.vies")
    other = _record("httpx._client")

    assert prefix_filter.filter(own) and own.prefix == ""
    assert prefix_filter.filter(other) and other.prefix == "[httpx]"


def test_console_handler():
    handler = config_console_handler(logging.WARNING)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)


def test_console_handler_debug_mode():
    handler = config_console_handler(logging.WARNING, debug_mode=True, color=False)
    assert handler.level == logging.DEBUG
    assert not handler.filters


def test_flight_recorder_flushes_on_warning(tmp_path):
    path = tmp_path / "logs" / "latest.log"
    recorder = config_flight_recorder(path, capacity=10)
    logger = logging.getLogger("helperkit.tests.flight")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    logger.addHandler(recorder)
    try:
        logger.debug("buffered detail")
        assert path.read_text(encoding="utf-8") == ""
        logger.warning("something odd")
        content = path.read_text(encoding="utf-8")
    finally:
        logger.removeHandler(recorder)
        recorder.target.close()
        recorder.close()

    assert "buffered detail" in content
    assert "WARNING helperkit.tests.flight" in content


def test_flight_recorder_flush_on_close(tmp_path):
    path = tmp_path / "latest.log"
    recorder = config_flight_recorder(path, flush_on_close=True)
    target = recorder.target
    recorder.handle(_record("helperkit.tests"))
    recorder.close()
    target.close()

    assert "msg" in path.read_text(encoding="utf-8")


def test_log_startup(caplog):
    logger = logging.getLogger("helperkit.tests.startup")
    with caplog.at_level(logging.DEBUG, logger="helperkit.tests.startup"):
        log_startup(
            logger,
            app_version="1.2.3",
            level=logging.INFO,
            handlers=[logging.NullHandler()],
            log_path=None,
            flight_recorder=True,
            flight_capacity=100,
            force_flush_fr=False,
            logger_levels={"httpx": logging.WARNING},
            redactor_mode="lenient",
        )

    assert "helperkit 1.2.3 (console=INFO, flight-recorder=ON)" in caplog.text
    assert "phonenumbers:" in caplog.text
    assert "path=<none>, capacity=100" in caplog.text
    assert "{'httpx': 'WARNING'}" in caplog.text
