import sys
from pathlib import Path

from loguru import logger

_CONSOLE_FORMAT = "<level>{level:<8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} - {message}"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    rotation: str = "5 MB",
    retention: int = 3,
) -> list[str]:
    """Send loguru output to stderr and, when ``log_file`` is set, to a rotating file.

    Any previously registered sinks are removed first. Returns one
    description per sink for display.
    """
    logger.remove()

    logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT)
    descriptions = [f"console (stderr, {level})"]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level, format=_FILE_FORMAT, rotation=rotation, retention=retention)
        descriptions.append(f"file ({log_file}, {level})")

    return descriptions
