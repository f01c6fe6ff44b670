import logging

from pytest import LogCaptureFixture

from stdnums.util.log import LoggerMixin, logger_for_cls


class MockClass(LoggerMixin):
    def do_something(self) -> None:
        self.log.info("Did something")


def test_logger_for_cls():
    logger = logger_for_cls(MockClass)
    assert isinstance(logger, logging.Logger)
    assert logger.name == f"{MockClass.__module__}.MockClass"


def test_logger_mixin(caplog: LogCaptureFixture):
    caplog.set_level(logging.INFO)

    MockClass().do_something()
    assert len(caplog.records) == 1
    [record] = caplog.records
    assert record.name.endswith(".MockClass")
    assert record.message == "Did something"
    assert record.levelname == "INFO"


def test_logger_is_cached():
    assert MockClass.logger() is MockClass.logger()
    assert MockClass().log is MockClass.logger()
