"""
Application settings and environment configuration.

Purpose:
- Centralize config (server bind, logging, dataset location, CORS)
- Load from environment variables / .env for 12-factor app compliance
- Provide sensible defaults for local development
"""
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

ROOT_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    # API metadata (also returned by the app information endpoint)
    API_TITLE: str = "Reference Data API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Static reference data: users, GitHub users, countries, states and cities."

    # Server: uvicorn bind address, used when running `python main.py`
    HOST: str = "0.0.0.0"
    PORT: int = 2000
    DEBUG: bool = False

    # Logging: DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_LEVEL: str = "INFO"

    # Directory holding the <dataset>.json files
    DATA_DIR: Path = ROOT_DIR / "data"

    # CORS - JSON list in the environment, e.g. CORS_ORIGINS='["https://example.com"]'
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"  # Load from .env file if present
        extra = "allow"


# Global settings instance
settings = Settings()
