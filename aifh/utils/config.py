import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"


def aifh_log_level() -> int:
    """
    Returns the numeric log level configured through the AIFH_LOG_LEVEL environment variable.
    Falls back to WARNING when the variable is not set.
    """
    name = os.environ.get("AIFH_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        msg = f""" Unknown log level '{name}' in AIFH_LOG_LEVEL:
            use one of DEBUG, INFO, WARNING, ERROR, CRITICAL, e.g. 'export AIFH_LOG_LEVEL=INFO'."""
        raise RuntimeError(msg)
    return level
