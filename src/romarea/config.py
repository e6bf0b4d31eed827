"""Configuration for romarea."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Loader and importer configuration."""

    database_url: str = "sqlite:///./romarea.db"
    encoding: str = "latin-1"
    log_level: str = "INFO"
    log_file: Path | None = None
    json_logs: bool = False
    log_max_string: int = 200

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_file = os.getenv("ROMAREA_LOG_FILE")

        return cls(
            database_url=os.getenv("ROMAREA_DATABASE_URL", cls.database_url),
            encoding=os.getenv("ROMAREA_ENCODING", cls.encoding),
            log_level=os.getenv("ROMAREA_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("ROMAREA_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
            log_max_string=int(
                os.getenv("ROMAREA_LOG_MAX_STRING", str(cls.log_max_string))
            ),
        )
