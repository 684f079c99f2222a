# src/match_json/settings.py
from functools import lru_cache
import os
from pathlib import Path
from typing import Literal, Optional, Tuple

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from match_json.constants import CONFIG_ENCODING, DEFAULT_ENV
from match_json.paths import Paths


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "human"] = "json"
    structured: bool = True


class OutputConfig(BaseModel):
    """How the JSON envelope is rendered."""

    indent: int = Field(2, ge=0)
    # " : " matches the spacing of the response format consumers already parse
    key_separator: str = " : "
    ensure_ascii: bool = False

    def separators(self) -> Tuple[str, str]:
        return (",", self.key_separator)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MATCH_JSON_",
        env_nested_delimiter="__",
        extra="ignore",
    )
    logging: LoggingConfig = LoggingConfig()
    output: OutputConfig = OutputConfig()

    @staticmethod
    def _deep_update(d: dict, u: dict) -> dict:
        # Recursively update dict d with values from u
        for k, v in u.items():
            if isinstance(v, dict) and isinstance(d.get(k), dict):
                d[k] = Settings._deep_update(d[k], v)
            else:
                d[k] = v
        return d

    @staticmethod
    def _read_yaml(path: Path) -> dict:
        with open(path, "r", encoding=CONFIG_ENCODING) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def load(path: str) -> "Settings":
        """Load `path` layered over the base.yaml next to it.

        base.yaml is optional; `path` itself must exist.
        """
        cfg_path = Path(path)
        base_path = cfg_path.parent / "base.yaml"
        base = Settings._read_yaml(base_path) if base_path.exists() else {}
        override = {} if cfg_path == base_path else Settings._read_yaml(cfg_path)
        merged = Settings._deep_update(base, override)
        return Settings(**merged)


@lru_cache(maxsize=8)
def get_settings(env: Optional[str] = None) -> Settings:
    """Return settings for the given env (or MATCH_JSON_ENV, default 'dev').

    Falls back to built-in defaults when configs/<env>.yaml does not exist,
    so the library works outside a project checkout.
    """
    env = env or os.environ.get("MATCH_JSON_ENV", DEFAULT_ENV)
    cfg_path = Paths.config_for(env)
    if not cfg_path.exists():
        return Settings()
    return Settings.load(str(cfg_path))
