"""Service configuration using pydantic-settings.

Sources, highest priority first: constructor arguments (the command line
flags), environment variables, ``.env``, secrets, then ``config.toml`` at the
repository root.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

CONFIG_TOML = Path(__file__).resolve().parents[3] / "config.toml"


class Settings(BaseSettings):
    """Aries Avalon settings; built once at startup and injected."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        toml_file=CONFIG_TOML,
    )

    # HTTP listener
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_docs_enabled: bool = False

    # Avalon Solr; every outbound query carries this timeout and is never retried
    solr_url: str = "http://avalon.lib.virginia.edu:8983/solr"
    solr_core: str = "avalon"
    solr_timeout_seconds: float = Field(default=10.0, gt=0)

    # Avalon web application, only used to build URLs handed back to callers
    avalon_url: str = "http://avalon.lib.virginia.edu"

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
            TomlConfigSettingsSource(settings_cls),
        )


@lru_cache
def get_settings() -> Settings:
    """Settings from the environment, cached for the process."""
    return Settings()
