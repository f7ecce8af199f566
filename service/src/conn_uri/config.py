"""Application configuration with environment variable support."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import URISyntaxError
from .models.uri import ConnectionURI


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Priority: ENV > .env.local > .env > defaults
    .env.local is gitignored for local overrides
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "conn-uri"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Fallback components for connection strings (path, port, query, fragment)
    DEFAULT_URI: str = "http://localhost:9200/"

    @field_validator("DEFAULT_URI")
    @classmethod
    def check_default_uri(cls, v: str) -> str:
        """The default URI must be absolute: scheme and host are required."""
        try:
            uri = ConnectionURI.from_string(v)
        except URISyntaxError as e:
            raise ValueError(f"DEFAULT_URI is not a valid URI: {e.message}") from e
        if uri.scheme is None or uri.host is None:
            raise ValueError(f"DEFAULT_URI must include a scheme and a host: {v}")
        return v

    def default_uri(self) -> ConnectionURI:
        return ConnectionURI.from_string(self.DEFAULT_URI)


# Global settings instance
settings = Settings()
