"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH_ENV = "GRANOLA_CONFIG_PATH"
MAX_DEPTH_ENV = "GRANOLA_RENDER_MAX_DEPTH"


@dataclass(slots=True)
class Settings:
    """Configuration for token lookup and rendering.

    Unset fields fall back to environment variables, so a ``.env`` file loaded
    with ``python-dotenv`` before construction is honoured.
    """

    config_path: Path | None = None
    home: Path | None = None
    read_retries: int = 3
    retry_delay: float = 0.1
    render_max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.config_path is None:
            override = os.getenv(CONFIG_PATH_ENV)
            self.config_path = Path(override) if override else None
        if self.home is None:
            self.home = Path.home()
        if self.render_max_depth is None:
            raw_depth = os.getenv(MAX_DEPTH_ENV)
            self.render_max_depth = int(raw_depth) if raw_depth else None
        if self.read_retries < 0:
            raise ValueError("read_retries cannot be negative.")
        if self.retry_delay < 0:
            raise ValueError("retry_delay cannot be negative.")


__all__ = ["CONFIG_PATH_ENV", "MAX_DEPTH_ENV", "Settings"]
