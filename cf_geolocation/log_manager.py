import collections
import logging
from datetime import datetime

import pytz

from .constants import LOG_BUFFER_SIZE, LOG_FORMAT

# Circular buffer to hold the last log lines in memory
LOG_BUFFER = collections.deque(maxlen=LOG_BUFFER_SIZE)


class TimezoneFormatter(logging.Formatter):
    """
    Formatter rendering asctime in a configured timezone.
    Unknown timezone names fall back to UTC.
    """
    def __init__(self, fmt=None, datefmt=None, tz_name='UTC'):
        super().__init__(fmt, datefmt)
        try:
            self.tz = pytz.timezone(tz_name)
        except pytz.UnknownTimeZoneError:
            self.tz = pytz.utc

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, tz=pytz.utc)
        local_dt = dt.astimezone(self.tz)
        if datefmt:
            return local_dt.strftime(datefmt)
        return local_dt.strftime('%Y-%m-%d %H:%M:%S,%f')[:-3]


class MemoryLogHandler(logging.Handler):
    """
    Logging handler that stores formatted records in LOG_BUFFER.
    """
    def __init__(self, tz_name='UTC'):
        super().__init__()
        self.setFormatter(TimezoneFormatter(LOG_FORMAT, tz_name=tz_name))

    def emit(self, record):
        try:
            msg = self.format(record)
            LOG_BUFFER.append(msg)
        except Exception:
            self.handleError(record)


def get_live_logs():
    """
    Returns the current contents of the log buffer as a list.
    """
    return list(LOG_BUFFER)


def clear_logs():
    LOG_BUFFER.clear()


def setup_memory_logging(tz_name='UTC'):
    """
    Attaches the memory handler to the root logger, once.
    """
    root_logger = logging.getLogger()

    for h in root_logger.handlers:
        if isinstance(h, MemoryLogHandler):
            h.setFormatter(TimezoneFormatter(LOG_FORMAT, tz_name=tz_name))
            return h

    memory_handler = MemoryLogHandler(tz_name)
    root_logger.addHandler(memory_handler)
    return memory_handler


def setup_logging(level='INFO', tz_name='UTC'):
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    setup_memory_logging(tz_name)
