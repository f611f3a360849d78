"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Placeholder signing key. Deployments must override JWT_SECRET_KEY.
DEFAULT_JWT_SECRET_KEY = "change-me-in-production-use-env-var"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Built once at process start and handed to ``create_app``.
    """

    database_path: str = "./data/authgate.db"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # JWT Configuration
    jwt_secret_key: str = DEFAULT_JWT_SECRET_KEY
    jwt_algorithm: str = "HS256"

    # Bcrypt work factor (higher = more secure but slower)
    # For tests, use 4 for faster execution
    bcrypt_work_factor: int = 12

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )

    @property
    def uses_default_secret(self) -> bool:
        """True when the JWT signing key was never configured."""
        return self.jwt_secret_key == DEFAULT_JWT_SECRET_KEY
