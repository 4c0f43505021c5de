import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def get_home_dir() -> Path:
    """Get MDLC home directory based on MDLC_HOME or default to ~/.mdlc."""
    env_home = os.environ.get("MDLC_HOME")
    return Path(env_home).expanduser().resolve() if env_home else Path.home() / ".mdlc"


def configure_logging(mdlc_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified mdlc logging.

    Args:
        mdlc_home: Path to the mdlc home directory. If None, derived from environment.
        level: Logging level name for the ``mdlc`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if mdlc_home is None:
        mdlc_home = get_home_dir()

    # Ensure directory exists
    mdlc_home.mkdir(parents=True, exist_ok=True)
    log_file = mdlc_home / "mdlc.log"

    root_logger = logging.getLogger("mdlc")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Connection pool chatter drowns the retry warnings
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach handlers installed by configure_logging (used when MDLC_HOME changes)."""
    global _CONFIGURED
    root_logger = logging.getLogger("mdlc")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"mdlc.{name}")
