"""Application configuration."""
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central application settings loaded from environment variables."""

    app_env: str = Field(default="development", alias="APP_ENV")
    api_host: str = Field(default="127.0.0.1", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    ui_port: int = Field(default=8501, alias="UI_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins: str = Field(default="http://127.0.0.1,http://localhost,*", alias="CORS_ORIGINS")

    practice_name: str = Field(default="KARIM P. BANANI, DDS", alias="PRACTICE_NAME")
    practice_specialty: str = Field(default="GENERAL DENTIST", alias="PRACTICE_SPECIALTY")
    practice_initials: str = Field(default="kpb", alias="PRACTICE_INITIALS")
    practice_phone: str = Field(default="(713) 797-0840", alias="PRACTICE_PHONE")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> List[str]:
        return [item.strip() for item in self.cors_origins.split(",") if item.strip()]

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
