from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    fileai_api_key: str = ""
    fileai_base_url: str = "https://api.orion.file.ai/prod/v1"
    fileai_timeout_seconds: int = 60

    poll_max_attempts: int = 20
    poll_interval_seconds: float = 15.0

    upload_split_pages: bool = True
    upload_lock_schema: bool = True

    summary_preview_chars: int = 150
