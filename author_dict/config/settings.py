"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode
from typing import Annotated, Optional, Dict, Any, List
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class DatabaseSettings(BaseSettings):
    """Sentence store connection settings"""

    url: str = Field(default="sqlite:///./sentences.db", description="SQLAlchemy database URL")
    echo: bool = Field(default=False)

    model_config = {"env_prefix": "DATABASE_", "env_file": ".env", "extra": "ignore"}


class DictionarySettings(BaseSettings):
    """External lexical API configuration"""

    api_url: str = Field(default="https://api.dictionaryapi.dev/api/v2/entries/en")
    timeout_seconds: float = Field(default=5.0, gt=0, le=60)

    model_config = {"env_prefix": "DICTIONARY_", "env_file": ".env", "extra": "ignore"}


class SecuritySettings(BaseSettings):
    """CORS configuration"""

    cors_origins: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["GET", "POST"]
    )
    cors_allow_headers: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])

    @field_validator('cors_origins', 'cors_allow_methods', 'cors_allow_headers', mode='before')
    @classmethod
    def parse_comma_separated(cls, v):
        """Parse comma separated values from environment variables"""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v or []

    model_config = {"env_prefix": "SECURITY_", "env_file": ".env", "extra": "ignore"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="Author's Dictionary")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_json: bool = Field(default=False)
    log_file: Optional[str] = Field(default=None)

    # Request body ceiling for bulk ingestion
    max_request_size_mb: int = Field(default=10, ge=1, le=512)

    # Nested Settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    dictionary: DictionarySettings = Field(default_factory=DictionarySettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @property
    def max_request_size_bytes(self) -> int:
        return self.max_request_size_mb * 1024 * 1024

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def load_settings_file(env_file: str) -> Settings:
    """Build settings whose nested groups read the same env file"""
    return Settings(
        _env_file=env_file,
        database=DatabaseSettings(_env_file=env_file),
        dictionary=DictionarySettings(_env_file=env_file),
        security=SecuritySettings(_env_file=env_file),
    )


def reload_settings(env_file: Optional[str] = None) -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = load_settings_file(env_file) if env_file else Settings()
    return settings
