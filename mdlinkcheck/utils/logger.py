import logging
import sys

LOGGER_NAME = "mdlinkcheck"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Single stderr handler, replaced on every configuration
_HANDLER: logging.StreamHandler | None = None


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure mdlinkcheck logging on stderr.

    Each call sets the level and installs one handler bound to the current
    ``sys.stderr``, dropping the handler of any earlier call.

    Args:
        level: Logging level for the ``mdlinkcheck`` logger.
    """
    global _HANDLER
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(level)

    if _HANDLER is not None:
        root_logger.removeHandler(_HANDLER)

    _HANDLER = logging.StreamHandler(sys.stderr)
    _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(_HANDLER)
    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
