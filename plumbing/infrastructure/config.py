"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False
    env: str = "local"

    # HTTP
    http_host: str = "localhost"
    http_port: int = 8080
    public_base_url: str | None = None

    # Database
    database_url: str = "postgresql+asyncpg://plumbing:plumbing_dev_password@db:5432/plumbing"

    # Media
    media_dir: str = "media/images"
    media_url_prefix: str = "media/images"

    # Authentication
    jwt_secret_key: str = "dev-jwt-secret-change-in-production"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60 * 24
    password_bcrypt_rounds: int = 12

    # Logging
    log_level: str = "INFO"
    log_format: str | None = None

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def base_url(self) -> str:
        """Public base URL used to build photo and brand links."""
        if self.public_base_url:
            return self.public_base_url.rstrip("/")
        return f"http://{self.http_host}:{self.http_port}"

    @property
    def is_production(self) -> bool:
        """Whether the service runs in the prod environment."""
        return self.env == "prod"


settings = Settings()
