# src/contractsim_core/log_config.py
import logging
import sys

PACKAGE_LOGGER = "contractsim_core"
LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"


def setup_logging(level=logging.INFO, stream=None):
    """
    Attaches a single console handler to the package logger.

    Only the `contractsim_core` logger is touched, so a host test runner or
    application keeps its own root configuration. Calling this again replaces
    the handler installed by the previous call.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.setLevel(level)
    package_logger.addHandler(console_handler)
    package_logger.debug(f"Logging configured at level {logging.getLevelName(level)}.")
