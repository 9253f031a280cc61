"""Configuration architecture using pydantic-settings for typed environment loading."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderConfig(BaseSettings):
    """JSON-RPC node configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ZILLIQA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    rpc_url: str = "http://127.0.0.1:5555"
    timeout: float = 30.0


class LogConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "INFO"
    # Optional rotating debug log, e.g. "logs/zilkit_{time}.log"
    file: str | None = None


class Settings:
    """Root settings aggregating all configuration sections."""

    def __init__(self) -> None:
        self.provider = ProviderConfig()
        self.log = LogConfig()


# Global settings instance - lazily loaded
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
