"""Runtime configuration.

Values come from ``PIM_*`` environment variables or a ``.env`` file in
the working directory, e.g. ``PIM_DATA_DIR=/srv/pim``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = _DEFAULT_DATA_DIR
    data_file: str = "pim.json"
    log_level: str = "INFO"
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @property
    def data_path(self) -> Path:
        return self.data_dir / self.data_file


def get_settings() -> Settings:
    return Settings()
