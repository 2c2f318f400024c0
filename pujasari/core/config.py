"""
Core configuration for Pujasari API
"""
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings"""

    # API Configuration
    PROJECT_NAME: str = "Pujasari-Backend"
    DESCRIPTION: str = "Aplikasi backend untuk pujasari"
    VERSION: str = "0.1.0"
    DOCS_URL: str = "/docs"
    ENVIRONMENT: str = "development"

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # Database Configuration
    DATABASE_URL: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "pujasari"
    DATABASE_TIMEOUT_MS: int = 5000

    # CORS Configuration
    ALLOWED_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def bind_host(self) -> str:
        """Listen on every interface only in production"""
        return self.HOST if self.is_production else "localhost"

# Global settings instance
settings = Settings()
