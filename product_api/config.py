"""
Product API configuration.

Settings are read from environment variables (case-insensitive) and an
optional ``.env`` file in the working directory.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal


class Settings(BaseSettings):
    """Application settings loaded from the environment."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Every request must carry "Authorization: Bearer <auth_token>"
    auth_token: str = "secret-token"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Pagination defaults for GET /api/products
    default_page: int = 1
    default_limit: int = 2

    @property
    def expected_authorization(self) -> str:
        return f"Bearer {self.auth_token}"


settings = Settings()
