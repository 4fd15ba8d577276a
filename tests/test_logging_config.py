import logging
import sys

import pytest

from fars.logging_config import setup_logging


@pytest.fixture(autouse=True)
def reset_fars_logger():
    yield
    logger = logging.getLogger("fars")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def test_setup_logging_uses_stderr_and_does_not_stack():
    setup_logging()
    logger = setup_logging(logging.DEBUG)

    assert logger.name == "fars"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.handlers[0].stream is sys.stderr


def test_setup_logging_copies_to_file(tmp_path):
    log_file = tmp_path / "fars.log"
    logger = setup_logging(logging.INFO, str(log_file))
    logging.getLogger("fars.engine").info("loaded %d years", 2)
    for h in logger.handlers:
        h.flush()

    assert len(logger.handlers) == 2
    assert "fars.engine: loaded 2 years" in log_file.read_text(encoding="utf-8")
