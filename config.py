"""Configuration management for the ito link service."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""
    
    # Database settings
    db_path: str = Field(
        default="./data/ito.db",
        description="SQLite database file path"
    )
    
    pool_size: int = Field(
        default=5,
        ge=1,
        description="Maximum number of pooled SQLite connections"
    )
    
    pool_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Seconds a connection waits on a locked database"
    )
    
    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )
    
    port: int = Field(
        default=8080,
        description="Port to listen on"
    )
    
    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes. Each worker opens its own connection pool."
    )
    
    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )
    
    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )
    
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
