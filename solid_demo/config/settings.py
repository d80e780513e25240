"""Application configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""
    
    # Load environment variables
    load_dotenv()
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    
    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development").lower()
    
    @classmethod
    def log_level(cls) -> str:
        """Effective log level name (DEBUG flag wins over LOG_LEVEL)."""
        return "DEBUG" if cls.DEBUG else cls.LOG_LEVEL


class DevelopmentConfig(Config):
    """Development configuration."""
    pass


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SENTRY_DSN = None


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    
    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }
    
    return config_map.get(env, DevelopmentConfig)
