"""Debug logging for native system detection."""

import os
from typing import Literal

from loguru import logger


def log_for_debugging(
    message: str,
    *,
    level: Literal["info", "error", "warn"] = "info",
) -> None:
    """
    Log a debug message if NATIVE_SYSTEM_DEBUG environment variable is set.

    Messages go through loguru, whose default sink is stderr, so the JSON
    printed by the CLI on stdout is never interleaved with log lines.

    Args:
        message: The message to log
        level: The log level (info, error, warn)
    """
    if not os.environ.get("NATIVE_SYSTEM_DEBUG"):
        return

    prefix = "[NativeSystem]"

    if level == "error":
        logger.error(f"{prefix} {message}")
    elif level == "warn":
        logger.warning(f"{prefix} {message}")
    else:
        logger.info(f"{prefix} {message}")
