import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from markview.markdown.options import TransformConfig


class Settings(BaseSettings):
    log_level: str = "WARNING"
    log_file: Path | None = None  # JSONL sink, disabled when unset

    parser_preset: str = "commonmark"  # markdown-it preset; tables and strikethrough are always enabled

    transform: TransformConfig = TransformConfig()

    model_config = SettingsConfigDict(
        env_prefix="MARKVIEW_",
        env_file=[os.getenv("MARKVIEW_ENV_FILE", ""), ".env"],
        extra="ignore",
        env_nested_delimiter="__",
    )
