"""
Logging Configuration
Sets up the 'peoplegraph' logger for the application.

The layout simulator logs one DEBUG record per animation tick (about sixty
a second), so it is held at INFO unless `trace_ticks` is requested. The
rest of the package follows `level`.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

TICK_LOGGER = "peoplegraph.controller.simulator"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    trace_ticks: bool = False
) -> None:
    """
    Configures the 'peoplegraph' logger hierarchy.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        trace_ticks: Also emit the simulator's per-tick DEBUG records.
    """
    logger = logging.getLogger("peoplegraph")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # NOTSET defers to the package level
    tick_level = logging.NOTSET if trace_ticks else max(level, logging.INFO)
    logging.getLogger(TICK_LOGGER).setLevel(tick_level)

    logger.info("Logging initialized.")
