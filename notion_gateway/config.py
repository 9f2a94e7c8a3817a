"""Configuration settings for the Notion Gateway.

Values are read from the environment (and an optional ``.env`` file).
The Notion integration token is read from ``NOTION_KEY``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Gateway settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    # Backend
    notion_key: str | None = Field(default=None, alias="NOTION_KEY")
    notion_api_url: str = "https://api.notion.com/v1"
    notion_version: str = "2022-06-28"
    backend_timeout: float = Field(default=30.0, gt=0)

    # MCP transport
    keepalive_interval: float = Field(default=10.0, gt=0)

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # CORS (comma-separated origins, or "*")
    cors_allowed_origins: str = "*"

    # Error tracking
    sentry_dsn: str | None = None

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        if self.cors_allowed_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    @property
    def has_credential(self) -> bool:
        return bool(self.notion_key)


settings = Settings()
