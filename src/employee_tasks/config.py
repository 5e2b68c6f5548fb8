"""Runtime configuration for the employee task store and CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(slots=True)
class StorageSettings:
    """SQLite connection policy."""

    busy_timeout_ms: int = 5_000


@dataclass(slots=True)
class LoggingSettings:
    """Root logger settings applied by the CLI."""

    level: str = "WARNING"


@dataclass(slots=True)
class Settings:
    """Application settings grouped by concern."""

    db_path: Path = Path(".employee_tasks.db")
    storage: StorageSettings = field(default_factory=StorageSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls, db_path: Path | None = None) -> Settings:
        """Load settings from environment with defaults for local development."""

        return cls(
            db_path=db_path or Path(os.getenv("EMPLOYEE_TASKS_DB_PATH", ".employee_tasks.db")),
            storage=StorageSettings(
                busy_timeout_ms=_env_int("EMPLOYEE_TASKS_BUSY_TIMEOUT_MS", default=5_000),
            ),
            logging=LoggingSettings(
                level=os.getenv("EMPLOYEE_TASKS_LOG_LEVEL", "WARNING").strip().upper(),
            ),
        )

    def validate(self) -> None:
        """Raise configuration error for out-of-range values."""

        if self.storage.busy_timeout_ms <= 0:
            raise ValueError("EMPLOYEE_TASKS_BUSY_TIMEOUT_MS must be > 0.")
        if self.logging.level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid EMPLOYEE_TASKS_LOG_LEVEL: {self.logging.level!r}. "
                f"Expected one of {', '.join(sorted(_LOG_LEVELS))}.",
            )

    def configure_logging(self) -> None:
        """Apply the configured level to the root logger."""

        logging.basicConfig(
            level=self.logging.level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as error:
        raise ValueError(f"Invalid integer value for {name}: {value!r}") from error
