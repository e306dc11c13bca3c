"""
Logging setup shared by the CLI and the API application.
"""

import logging
import os
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(*, level: Optional[str] = None) -> None:
    """Configure the root logger.

    The level comes from the argument, then ``TRIWIZARD_LOG_LEVEL``,
    then INFO.
    """
    level_name = (level or os.getenv("TRIWIZARD_LOG_LEVEL") or "INFO").upper()
    numeric_level = getattr(logging, level_name, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(level=numeric_level, format=_DEFAULT_FORMAT)
    logging.getLogger().setLevel(numeric_level)
