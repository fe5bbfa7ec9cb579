"""Configuration loading and validation for the actor headshot provider."""

import tomllib
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from urls import manifest_url


DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULTS = {
    "base_url": "http://127.0.0.1",
    "manifest_path": "/Filetree.json",
    "content_path": "/Content/",
    "cache_duration_minutes": 30,
    "enable_detailed_logging": False,
    "request_timeout": 30.0,
}


@dataclass
class Config:
    base_url: str
    manifest_path: str
    content_path: str
    cache_duration_minutes: int
    enable_detailed_logging: bool
    request_timeout: float = 30.0

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.cache_duration_minutes < 1:
            raise ValueError(
                f"cache_duration_minutes must be at least 1, got {self.cache_duration_minutes}"
            )

    @property
    def manifest_url(self) -> str:
        """Full URL of the Filetree.json manifest."""
        return manifest_url(self.base_url, self.manifest_path)

    @property
    def cache_duration(self) -> timedelta:
        return timedelta(minutes=self.cache_duration_minutes)

    @classmethod
    def load(
        cls,
        config_path: Path | None = None,
        base_url_override: str | None = None,
        cache_duration_override: int | None = None,
        detailed_logging_override: bool | None = None,
    ) -> "Config":
        """Load configuration from TOML file with defaults."""
        config_data = dict(DEFAULTS)

        path = config_path or DEFAULT_CONFIG_PATH
        if path.exists():
            with open(path, "rb") as f:
                file_config = tomllib.load(f)
                config_data.update(
                    {k: v for k, v in file_config.items() if k in DEFAULTS}
                )

        if base_url_override:
            config_data["base_url"] = base_url_override
        if cache_duration_override is not None:
            config_data["cache_duration_minutes"] = cache_duration_override
        if detailed_logging_override is not None:
            config_data["enable_detailed_logging"] = detailed_logging_override

        return cls(
            base_url=str(config_data["base_url"]),
            manifest_path=str(config_data["manifest_path"]),
            content_path=str(config_data["content_path"]),
            cache_duration_minutes=int(config_data["cache_duration_minutes"]),
            enable_detailed_logging=bool(config_data["enable_detailed_logging"]),
            request_timeout=float(config_data["request_timeout"]),
        )
