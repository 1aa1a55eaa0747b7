"""Structured JSON logging setup for the service process."""

import logging
import sys

from pythonjsonlogger import jsonlogger

_HANDLER_NAME = "probe_service.json"


def logging_configure(level: str = "INFO") -> logging.Handler:
    """Install the JSON stdout handler on the root logger.

    Calling this again replaces the previously installed handler instead of
    stacking a second one.

    Args:
        level: Root logging level name.

    Returns:
        logging.Handler: Installed stdout handler.
    """

    log_handler = logging.StreamHandler(sys.stdout)
    log_handler.set_name(_HANDLER_NAME)
    log_handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))

    root_logger = logging.getLogger()
    for existing_handler in list(root_logger.handlers):
        if existing_handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(existing_handler)
    root_logger.setLevel(level.upper())
    root_logger.addHandler(log_handler)
    return log_handler
