"""Configuration management using pydantic-settings"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    output_dir: str = Field(default="./output", description="Directory for exported documents")
    drafts_path: str = Field(default="./data/drafts.db", description="Path to SQLite draft store")
    log_level: str = Field(default="INFO", description="Logging level")

    # Print settings
    open_print_view: bool = Field(default=True, description="Open print pages in the web browser")

    # PDF settings
    pdf_font_path: Optional[str] = Field(default=None, description="Serif TTF font for PDF output")
    pdf_bold_font_path: Optional[str] = Field(default=None, description="Bold serif TTF font for PDF output")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    """Get application settings"""
    return Settings()
