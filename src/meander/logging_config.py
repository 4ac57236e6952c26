"""
Logging Configuration
=====================
Console and file logging for the `meander` demo.

The demo prints its values on stdout, so log records go to stderr and never
interleave with the output a caller may be piping somewhere. A log file, when
requested, always records at DEBUG with full timestamps.
"""
import logging
import sys
from typing import Optional

CONSOLE_FORMAT = '%(levelname)s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Marks handlers installed here, so re-running setup replaces only those.
_HANDLER_ATTR = "_meander_handler"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route records of the 'meander' namespace to stderr and optionally a file.

    Args:
        verbose: Show DEBUG records on the console instead of warnings only.
        log_file: Optional path; the file is truncated and receives every record.

    Returns:
        The configured 'meander' logger.
    """
    logger = logging.getLogger("meander")

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)]:
        logger.removeHandler(handler)
        handler.close()

    console_level = logging.DEBUG if verbose else logging.WARNING
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    setattr(console_handler, _HANDLER_ATTR, True)
    logger.addHandler(console_handler)

    logger_level = console_level
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%H:%M:%S'))
        setattr(file_handler, _HANDLER_ATTR, True)
        logger.addHandler(file_handler)
        logger_level = logging.DEBUG

    logger.setLevel(logger_level)
    return logger
