"""
Environment configuration for the API.

Settings are plain attributes read from environment variables, optionally
seeded from a .env file at the repository root.
"""

import os
from functools import lru_cache
from pathlib import Path


# Load .env file if it exists
def _load_dotenv():
    env_path = Path(__file__).parent.parent.parent / ".env"
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()
                    if key and value and key not in os.environ:
                        os.environ[key] = value

_load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        # App
        self.app_name: str = os.environ.get("APP_NAME", "Rechart")
        self.app_version: str = os.environ.get("APP_VERSION", "1.0.0")
        self.environment: str = os.environ.get("ENVIRONMENT", "development")
        self.api_prefix: str = os.environ.get("API_PREFIX", "/api")
        self.log_level: str = os.environ.get("LOG_LEVEL", "INFO").upper()

        # Server settings
        self.host: str = os.environ.get("HOST", "0.0.0.0")
        self.port: int = int(os.environ.get("PORT", "8000"))
        self.debug: bool = os.environ.get("DEBUG", "false").lower() == "true"

        # CORS settings
        self.allowed_origins: list = os.environ.get(
            "CORS_ORIGINS",
            "http://localhost:3000,http://127.0.0.1:3000"
        ).split(",")

        # Completion API
        self.xai_api_key: str = os.environ.get("XAI_API_KEY", "")
        self.xai_base_url: str = os.environ.get("XAI_BASE_URL", "https://api.x.ai/v1")
        self.xai_models: list = [
            model.strip()
            for model in os.environ.get("XAI_MODELS", "grok-3-mini,grok-3").split(",")
            if model.strip()
        ]
        self.xai_timeout_seconds: float = float(os.environ.get("XAI_TIMEOUT_SECONDS", "30"))
        self.xai_temperature: float = float(os.environ.get("XAI_TEMPERATURE", "0.1"))

        # Sharing
        self.public_base_url: str = os.environ.get("PUBLIC_BASE_URL", "http://localhost:3000")

    @property
    def has_xai_key(self) -> bool:
        """Check if the completion API key is configured."""
        return bool(self.xai_api_key)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
