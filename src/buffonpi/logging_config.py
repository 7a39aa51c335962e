"""
Logging Configuration
Sets up the global logger for the application.

Every drop is logged at DEBUG by the simulator. Thousands of drops per run
would bury everything else, so that logger stays at INFO unless drop logging
is asked for explicitly.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "buffonpi"
DROP_LOGGER = "buffonpi.solvers.simulator"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_drops: bool = False,
) -> None:
    """
    Configures the logger of the 'buffonpi' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        log_drops: Also emit the DEBUG record of every single drop.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Repeated calls replace the handlers instead of stacking them
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

    drop_logger = logging.getLogger(DROP_LOGGER)
    drop_logger.setLevel(level if log_drops else max(level, logging.INFO))

    logger.info("Logging initialized.")
