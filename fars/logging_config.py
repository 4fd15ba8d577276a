"""
Logging setup for the `fars` command.

Log records go to stderr so that tables printed by `summarize` stay clean on
stdout and can be piped.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the 'fars' logger and return it.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path that receives a copy of every record.
    """
    logger = logging.getLogger("fars")
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)
        logger.addHandler(h)

    logger.debug("fars CLI logging at %s%s", logging.getLevelName(level),
                 f", copy in {log_file}" if log_file else "")
    return logger
