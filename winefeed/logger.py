import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


class _BelowErrorFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


def setup_logger(
    name: Optional[str] = None,
    log_level: int = logging.INFO,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Sets up the export logger.
    Progress goes to stdout and failures to stderr, so a failed run is visible
    to whatever schedules it. When `log_dir` is given (normally
    FeedConfig.log_dir), everything is also kept in a rotating `feed.log` there.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Only look at this logger's own handlers; parents may be configured elsewhere.
    if logger.handlers:
        return logger

    console_format = logging.Formatter("%(message)s")

    # 1. Progress on stdout
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(log_level)
    stdout_handler.addFilter(_BelowErrorFilter())
    stdout_handler.setFormatter(console_format)
    logger.addHandler(stdout_handler)

    # 2. Errors on stderr
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)
    stderr_handler.setFormatter(console_format)
    logger.addHandler(stderr_handler)

    # 3. Run history on disk
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / "feed.log", maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"  # 5 MB
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger
