import logging
import json

import numpy as np

from aifh.utils.config import aifh_log_level

# Attributes every LogRecord carries; anything else on the record came in through 'extra'.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def _json_default(value):
    """Serialize the numpy values that aifh passes in 'extra' (shapes, counts, vectors)."""
    if isinstance(value, (np.ndarray, np.generic)):
        return value.tolist()
    return str(value)


class JsonFormatter(logging.Formatter):
    """
    Format log records as one JSON object per line: level, time, logger name, message,
    the fields passed via 'extra' and, when present, the formatted exception.
    """
    def format(self, record):
        log_record = {
            "level": record.levelname,
            "time": self.formatTime(record, self.datefmt),
            "name": record.name,
            "message": record.getMessage(),
        }
        log_record.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES
        )
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=_json_default)


def setup_json_logging(level=None, logger_name: str = "aifh") -> logging.Logger:
    """
    Send the records of the aifh loggers (e.g. the DEBUG note convert_arrays emits when it
    ignores extra ideal rows) to stderr as JSON lines.

    Args:
        level: The log level. When None, the level comes from AIFH_LOG_LEVEL.
        logger_name: The logger to configure. Pass "" to configure the root logger.

    Returns:
        logging.Logger: The configured logger.
    """
    if level is None:
        level = aifh_log_level()
    logger = logging.getLogger(logger_name)
    for handler in logger.handlers[:]:
        if isinstance(handler.formatter, JsonFormatter):
            logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
