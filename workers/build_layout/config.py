"""
Worker configuration
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class LayoutSettings(BaseSettings):
    """build_layout settings, read from BUILD_LAYOUT_* environment variables"""

    PROJECT_DIR: str = "android"
    PROFILE: str = "v1"
    MANIFEST: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BUILD_LAYOUT_",
        env_file=".env",
        extra="ignore",
        case_sensitive=True,
    )


settings = LayoutSettings()
