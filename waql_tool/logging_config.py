"""
Logging setup for the command line front end.

Library modules only create loggers; configuring handlers is left to the
application embedding them.
"""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Union[str, int] = logging.WARNING) -> None:
    """Configure the root logger."""
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )

    # requests/urllib3 are chatty at debug level
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))
