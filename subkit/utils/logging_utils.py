"""
Logging setup shared by the FastAPI app and the subkit CLI.

Lines look like `2026-10-17 10:30:45 | INFO | [a1b2c3d4] GET /text/words -> 200`,
where the bracketed value is the HTTP request id ("startup" during boot,
"cli-<id>" for a CLI run).
"""
import logging
from typing import Optional, Union


DEFAULT_LOGGER_NAME = "subkit"


def setup_logger(
    log_level: Union[int, str] = logging.INFO,
    logger_name: str = DEFAULT_LOGGER_NAME
) -> logging.Logger:
    """
    Attach a stream handler to the subkit logger and set its level.

    log_level accepts a logging constant or a LOG_LEVEL setting such as
    "debug". Calling it again only updates the level.
    """
    log_format = logging.Formatter(
        '%(asctime)s | %(levelname)s | [%(request_id)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level.upper() if isinstance(log_level, str) else log_level)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(log_format)
        logger.addHandler(console_handler)

    return logger


def get_request_logger(
    request_id: str,
    base_logger: Optional[logging.Logger] = None
) -> logging.LoggerAdapter:
    """Wrap base_logger (default: "subkit") so every record carries request_id."""
    if base_logger is None:
        base_logger = logging.getLogger(DEFAULT_LOGGER_NAME)

    return logging.LoggerAdapter(base_logger, {"request_id": request_id})
