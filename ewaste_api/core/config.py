from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database settings
    database_url: str = "sqlite:///./ewaste.db"

    # Image uploads
    upload_dir: str = "uploads"
    upload_url_prefix: str = "/uploads"

    # Outbound email (disabled while smtp_host is unset)
    smtp_host: Optional[str] = None
    smtp_port: int = 587
    smtp_username: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_use_tls: bool = True
    smtp_timeout: int = 10
    email_from: str = "noreply@ewaste.local"
    email_workers: int = 2

    # CORS settings
    allowed_origins: list[str] = ["*"]

    # Rate limiting for /register and /login
    auth_rate_limit: str = "5/minute"
    rate_limit_enabled: bool = True

    # Application settings
    app_name: str = "E-Waste Exchange Backend"
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
