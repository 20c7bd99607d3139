# File: src/uvsync/hooks/xlogging/logger_constants.py

import logging


RE_PATH_BACKSLASH = r"\\(?=\w{2,})"

TRACE = logging.DEBUG - 1  # (9) LOG.trace() will not output at DEBUG level

DEFAULT_LOG_FORMAT = r"%(levelName)s %(asctime)s %(name)s %(fileAndLine)s %(message)s"
DEFAULT_LOG_DATEFMT = "%H:%M:%S"
DEFAULT_LOG_TIMEZONE = "UTC"


_logging_constants_initialized = False


def initialize_logger_constants() -> None:
    """Register the custom level names with the logging module, once."""
    global _logging_constants_initialized
    if _logging_constants_initialized:
        return
    _logging_constants_initialized = True
    if "TRACE" not in logging.getLevelNamesMapping():
        logging.addLevelName(TRACE, "TRACE")


# End of file: src/uvsync/hooks/xlogging/logger_constants.py
