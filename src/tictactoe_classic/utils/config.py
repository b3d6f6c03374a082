"""
Configuration for the terminal front end.
"""

import logging


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _normalize_log_level(level: str) -> str:
    """Upper-case a level name and check logging knows it."""
    name = str(level).strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level '{level}'. Expected one of: {', '.join(LOG_LEVELS)}."
        )
    return name


class Config:
    """Front-end configuration with sensible defaults."""

    def __init__(
        self,
        log_level: str = DEFAULT_LOG_LEVEL,
        ascii_board: bool = False,
    ):
        self.log_level = _normalize_log_level(log_level)
        self.ascii_board = ascii_board

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    def configure_logging(self) -> None:
        """Install a root handler at the configured level. Front ends only."""
        logging.basicConfig(level=self.log_level_value, format=LOG_FORMAT)


# Default configuration
DEFAULT_CONFIG = Config()
