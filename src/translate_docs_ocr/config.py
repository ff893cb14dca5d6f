"""
Configuration management for translate-docs-ocr.

Handles loading configuration from YAML files and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if present (before Settings initialization)
load_dotenv()


class OCRConfig(BaseModel):
    """Configuration for the Tesseract OCR engine."""

    # Directory holding the *.traineddata language models
    tessdata_dir: Path | None = Field(default=None)
    language: str = Field(default="rus")
    page_segmentation_mode: int = Field(default=3, ge=0, le=13)
    tesseract_cmd: str | None = Field(default=None)

    @field_validator("tessdata_dir")
    @classmethod
    def expand_path(cls, v: Path | None) -> Path | None:
        """Expand user home directory and make path absolute."""
        return Path(v).expanduser().resolve() if v else None


class TranslationConfig(BaseModel):
    """Configuration for the LibreTranslate service."""

    libretranslate_url: str = Field(default="http://localhost:5000")
    api_key: str = Field(default="")
    source_language: str = Field(default="ru")
    target_language: str = Field(default="en")
    timeout_seconds: float = Field(default=30.0, gt=0, le=600)

    @field_validator("libretranslate_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class PDFConfig(BaseModel):
    """Configuration for PDF page rasterization."""

    target_width: int = Field(default=2000, ge=100, le=10000)
    max_height: int = Field(default=2000, ge=100, le=10000)
    landscape_rotation: int = Field(default=90)
    jpeg_quality: int = Field(default=95, ge=1, le=100)

    @field_validator("landscape_rotation")
    @classmethod
    def check_rotation(cls, v: int) -> int:
        if v not in (0, 90, 180, 270):
            raise ValueError("landscape_rotation must be one of 0, 90, 180, 270")
        return v


class ProcessingConfig(BaseModel):
    """Configuration for the processing pipeline."""

    # Drop whitespace-only OCR regions instead of sending them for translation
    skip_empty_regions: bool = Field(default=False)
    create_target_dir: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO")
    file: Path | None = Field(default=None)
    format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    max_file_size_mb: int = Field(default=10, ge=1, le=100)
    backup_count: int = Field(default=5, ge=1, le=20)

    @field_validator("level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper()


class Settings(BaseSettings):
    """Main settings class that combines all configurations."""

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATE_DOCS_OCR_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    ocr: OCRConfig = Field(default_factory=OCRConfig)
    translation: TranslationConfig = Field(default_factory=TranslationConfig)
    pdf: PDFConfig = Field(default_factory=PDFConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable fallbacks for API keys."""
        super().__init__(**data)
        if not self.translation.api_key:
            self.translation.api_key = os.getenv("LIBRETRANSLATE_API_KEY", "")

    @classmethod
    def from_yaml(cls, path: Path | str) -> Settings:
        """Load settings from a YAML file, with environment variable overrides."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}

        yaml_config = _substitute_env_vars(yaml_config)

        return cls(**yaml_config)


def _substitute_env_vars(config: dict[str, Any]) -> dict[str, Any]:
    """Recursively substitute ${ENV_VAR} patterns in config values."""
    result = {}
    for key, value in config.items():
        if isinstance(value, dict):
            result[key] = _substitute_env_vars(value)
        elif isinstance(value, str) and value.startswith("${") and value.endswith("}"):
            env_var = value[2:-1]
            result[key] = os.getenv(env_var, "")
        elif isinstance(value, list):
            result[key] = [
                _substitute_env_vars(item) if isinstance(item, dict) else item for item in value
            ]
        else:
            result[key] = value
    return result


CONFIG_SEARCH_PATHS = (
    Path("config.yaml"),
    Path("config.yml"),
    Path(".translate-docs-ocr.yaml"),
)


def load_config(path: Path | str | None = None) -> Settings:
    """
    Load settings for a run.

    Without an explicit path the first of CONFIG_SEARCH_PATHS present in the
    working directory is used; with none present, settings come from the
    environment and defaults only.
    """
    if path is None:
        path = next((p for p in CONFIG_SEARCH_PATHS if p.exists()), None)

    if path is None:
        return Settings()
    return Settings.from_yaml(path)


DEFAULT_CONFIG = """# translate-docs-ocr configuration

ocr:
  # Directory containing Tesseract *.traineddata files (omit to use the system default)
  tessdata_dir: ./tessdata
  # Tesseract language model used for recognition
  language: rus
  # Tesseract page segmentation mode (3 = fully automatic)
  page_segmentation_mode: 3

translation:
  # Base URL of the LibreTranslate service
  libretranslate_url: http://localhost:5000
  # api_key: ${LIBRETRANSLATE_API_KEY}
  source_language: ru
  target_language: en
  timeout_seconds: 30

pdf:
  # Rendered page width in pixels
  target_width: 2000
  # Upper bound on rendered page height in pixels
  max_height: 2000
  # Rotation applied to landscape pages (0, 90, 180 or 270)
  landscape_rotation: 90
  jpeg_quality: 95

processing:
  # Skip OCR regions that contain only whitespace
  skip_empty_regions: false
  create_target_dir: true

logging:
  level: INFO
  # file: ./logs/translate_docs_ocr.log
"""


def create_default_config(path: Path | str = "config.yaml") -> None:
    """Create a default configuration file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(DEFAULT_CONFIG)
