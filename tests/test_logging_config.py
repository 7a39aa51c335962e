import logging

import pytest

from buffonpi.logging_config import DROP_LOGGER, PACKAGE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def restore_loggers():
    yield
    logging.getLogger(PACKAGE_LOGGER).handlers.clear()
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.NOTSET)
    logging.getLogger(DROP_LOGGER).setLevel(logging.NOTSET)


def test_drop_records_quiet_by_default():
    setup_logging(level=logging.DEBUG)
    assert logging.getLogger(PACKAGE_LOGGER).isEnabledFor(logging.DEBUG)
    assert not logging.getLogger(DROP_LOGGER).isEnabledFor(logging.DEBUG)


def test_drop_records_on_request():
    setup_logging(level=logging.DEBUG, log_drops=True)
    assert logging.getLogger(DROP_LOGGER).isEnabledFor(logging.DEBUG)


def test_repeated_setup_does_not_stack_handlers():
    setup_logging()
    setup_logging()
    assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1


def test_log_file(tmp_path):
    path = tmp_path / "run.log"
    setup_logging(log_file=str(path))
    logger = logging.getLogger(PACKAGE_LOGGER)
    assert len(logger.handlers) == 2
    for handler in logger.handlers:
        handler.flush()
    assert "Logging initialized." in path.read_text(encoding="utf-8")
    for handler in logger.handlers:
        handler.close()
