import logging

import pytest

from redis_modules_sdk import RedisModule, RedisModuleError
from redis_modules_sdk.logger import BoundLogger, create_logger, log


class RecordingLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def debug(self, msg, *args, **kwargs) -> None:
        self.records.append(("debug", msg % args if args else msg))

    def info(self, msg, *args, **kwargs) -> None:
        self.records.append(("info", msg % args if args else msg))

    def warn(self, msg, *args, **kwargs) -> None:
        self.records.append(("warn", msg % args if args else msg))


def test_show_debug_logs_lowers_level() -> None:
    assert create_logger(level="info").level == "info"
    assert create_logger(level="info", show_debug_logs=True).level == "debug"
    assert create_logger(level="trace", show_debug_logs=True).level == "trace"


def test_create_logger_reuses_bound_logger() -> None:
    bound = create_logger(logger=RecordingLogger())
    assert create_logger(logger=bound) is bound
    assert isinstance(create_logger(logger=bound, show_debug_logs=True), BoundLogger)


def test_debug_messages_require_the_flag() -> None:
    recorder = RecordingLogger()
    bound = create_logger(logger=recorder)
    log("debug", "hidden", logger=bound)
    log("debug", "shown", show_debug_logs=True, logger=bound)
    log("info", "always", logger=bound)
    assert recorder.records == [("debug", "shown"), ("info", "always")]


def test_error_level_raises() -> None:
    with pytest.raises(RedisModuleError, match="fatal"):
        log("error", "fatal")


def test_module_log_uses_its_own_flag(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tests.logger")
    quiet = RedisModule("quiet", {}, {"logger": logger})
    loud = RedisModule("loud", {}, {"logger": logger, "show_debug_logs": True})
    with caplog.at_level(logging.DEBUG, logger="tests.logger"):
        quiet.log("debug", "quiet debug")
        loud.log("debug", "loud debug")
        quiet.log("warn", "quiet warning")
    messages = [record.getMessage() for record in caplog.records]
    assert "quiet debug" not in messages
    assert "loud debug" in messages
    assert "quiet warning" in messages
