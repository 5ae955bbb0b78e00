from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DOTSTAMP_", case_sensitive=False)

    config_dir: Path = Path("~/.config/dotstamp")

    def resolved_config_dir(self) -> Path:
        return self.config_dir.expanduser()
