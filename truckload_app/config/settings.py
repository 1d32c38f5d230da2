"""
Basic settings and logging configuration for the truck load calculator.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


def _get_project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _get_user_data_dir(project_root: Path) -> Path:
    override = os.environ.get("TRUCKLOAD_DATA_DIR")
    if override:
        return Path(override)
    return project_root / "truckload_app_data"


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    log_level: int = logging.INFO

    @property
    def log_path(self) -> Path:
        return self.data_dir / "truckload.log"

    @classmethod
    def default(cls) -> "Settings":
        project_root = _get_project_root()
        data_dir = _get_user_data_dir(project_root)
        data_dir.mkdir(parents=True, exist_ok=True)
        return cls(project_root=project_root, data_dir=data_dir)


def init_logging(settings: Settings) -> None:
    """Configure basic logging to the data directory log file."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(settings.log_path, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info("Logging initialized. Data dir %s", settings.data_dir)
