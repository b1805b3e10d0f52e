from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized runtime configuration for the intake parser.
    All defaults are sensible for dev-mode; ops override via ENV.
    """
    # --- Parsing ---
    # Emails containing this marker were injected by the platform itself
    platform_email_marker: str = Field(default="matchdb")

    # --- Logging ---
    log_level: str = Field(default="INFO")
    log_dir: Optional[str] = Field(default=None)
    log_max_bytes: int = Field(default=10485760)  # 10MB
    log_backup_count: int = Field(default=5)

    model_config = SettingsConfigDict(
        env_prefix="INTAKE_",
        env_file=".env",
        extra="ignore",
    )

# Create a singleton instance
settings = Settings()
