"""
aifh: data structures for feeding training data to learning algorithms.

The library only emits log records (on the "aifh.*" loggers); to see them as JSON lines:

    from aifh import setup_json_logging
    setup_json_logging()  # level from AIFH_LOG_LEVEL, WARNING by default
"""

from aifh.utils.json_logging import setup_json_logging

__all__ = ["setup_json_logging"]
