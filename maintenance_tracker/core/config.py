from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server settings
    app_name: str = "Maintenance Request Tracker"
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False

    # Logging settings
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Create the HVAC and elevator demo tickets on startup
    seed_demo_data: bool = True

    # CORS settings (sent on every response)
    cors_allow_origin: str = "*"
    cors_allow_methods: list[str] = ["POST", "GET", "OPTIONS", "PUT", "DELETE"]
    cors_allow_headers: list[str] = [
        "Accept",
        "Content-Type",
        "Content-Length",
        "Accept-Encoding",
        "X-CSRF-Token",
        "Authorization",
    ]

    class Config:
        env_file = ".env"


settings = Settings()
