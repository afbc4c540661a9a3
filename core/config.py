"""Application settings"""
import logging

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Application configuration from environment"""
    app_title: str = "Reaction Insights API"
    log_level: str = "INFO"
    top_n: int = Field(default=10, ge=1)
    app_host: str = "0.0.0.0"
    app_port: int = Field(default=8000, ge=1, le=65535)

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def log_level_value(self) -> int:
        level = getattr(logging, self.log_level.upper(), None)
        return level if isinstance(level, int) else logging.INFO
