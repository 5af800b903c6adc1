from datetime import datetime, timezone
from pathlib import Path
import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logger(
    log_dir: str | Path = "logs",
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "30 days",
) -> Path:
    """Route loguru to stdout and to a timestamped, rotating file in ``log_dir``.

    Console colors follow loguru's TTY detection. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"simulation_{stamp}.log"

    logger.configure(
        handlers=[
            {"sink": sys.stdout, "level": level, "format": LOG_FORMAT},
            {
                "sink": log_file,
                "level": level,
                "format": LOG_FORMAT,
                "rotation": rotation,
                "retention": retention,
                "compression": "zip",
                "encoding": "utf-8",
            },
        ]
    )
    logger.debug("Logger initialized | level={}, file={}", level, log_file)
    return log_file
