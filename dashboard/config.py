# dashboard/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scoring service configuration"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TAILOR_",
        case_sensitive=False,
        extra="ignore",
    )

    # App settings
    app_name: str = "Resume Tailoring Scoring Service"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


settings = Settings()
