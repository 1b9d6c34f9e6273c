"""
Configuration management for the Holocron service
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Repositories
    seed_data_path: str | None = None  # YAML or JSON; built-in data when unset
    repository_latency: float = 0.0  # simulated fetch latency, seconds
    random_seed: int | None = None

    # Resolution
    fetch_timeout: float = 10.0  # seconds per repository call

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "HOLOCRON_"
        case_sensitive = False


# Global settings instance
settings = Settings()
