"""
Configuration management for the catalog gateway
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream catalog REST API
    upstream_base_url: str = "https://odyssey-lift-off-rest-api.herokuapp.com/"
    upstream_timeout: float | None = None  # seconds; None waits indefinitely

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "CATALOG_GATEWAY_"
        case_sensitive = False


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        upstream_base_url=settings.upstream_base_url,
        environment=settings.environment,
    )
