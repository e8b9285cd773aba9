"""Logging setup for host applications.

Library modules only create loggers; handlers are configured here.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(level: int | str = logging.INFO, quiet_http: bool = True) -> None:
    """Configure root logging.

    Args:
        level: Root log level (name or number)
        quiet_http: Raise httpx/httpcore loggers to WARNING
    """
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)

    if quiet_http:
        for name in ("httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.WARNING)
