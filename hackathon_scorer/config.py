from pydantic_settings import BaseSettings
from pathlib import Path
from typing import Optional

class Settings(BaseSettings):

    # App Setting
    app_name: str = "Hackathon Scorer API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    cors_origins: list = ["*"]

    # Gemini Setting
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float = 0.2

    # Page fetching Setting
    http_timeout: float = 30.0
    http_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/144.0.0.0 Safari/537.36"
    )

    # Prompt truncation Setting
    rubric_text_limit: int = 15000
    description_text_limit: int = 12000

    # File upload Setting
    max_file_size: int = 10 * 1024 * 1024

    # Session state Setting
    session_file: Path = Path("data/session.json")

    class Config:
        """Pydantic config"""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

def get_settings() -> Settings:
    return Settings()

settings = get_settings()
