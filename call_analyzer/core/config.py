"""
Application configuration
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings"""
    
    APP_NAME: str = "Call Log Analyzer"
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""  # empty = console only
    
    # Analysis
    TOP_NUMBERS_LIMIT: int = 5
    MAX_INPUT_CHARS: int = 1_000_000
    
    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    
    # Environment
    ENVIRONMENT: str = "development"
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
