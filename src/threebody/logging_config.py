"""
Logging setup shared by the command-line and HTTP entry points.

Library modules only create loggers; handlers are installed here, once,
by whichever entry point runs.
"""
import logging

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "info") -> None:
    """
    Install a root stream handler at the given level.

    Args:
        level: One of LOG_LEVELS (case-insensitive).

    Raises:
        ValueError: If the level name is unknown.
    """
    if level.lower() not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level '{level}'. Choose from: {', '.join(LOG_LEVELS)}"
        )
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # basicConfig is a no-op once handlers exist; keep the requested level anyway
    logging.getLogger().setLevel(level.upper())
