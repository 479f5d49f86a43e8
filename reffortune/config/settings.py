from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_KB_DIR = Path(__file__).resolve().parent.parent / "knowledge"

# Ordered (file name, chunk kind). Knowledge files first, examples pack last.
DEFAULT_KB_FILES: list[tuple[str, str]] = [
    ("mysticg_divination_KB_full_th.md", "kb"),
    ("mysticflow-knowledge-complete.md", "kb"),
    ("mystical-knowledge-handbook.md", "kb"),
    ("mysticflow_ai_knowledge_summary_th.md", "kb"),
    ("esiimsi_knowledge_th.md", "kb"),
    ("mysticg_examples_pack_th.md", "example"),
]


class Settings(BaseSettings):
    gemini_api_key: str = Field(default="", validation_alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-2.0-flash", validation_alias="GEMINI_MODEL")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        validation_alias="GEMINI_BASE_URL",
    )
    gemini_temperature: float = Field(default=0.7, validation_alias="GEMINI_TEMPERATURE")
    gemini_timeout_seconds: float = Field(
        default=30.0,
        validation_alias="GEMINI_TIMEOUT_SECONDS",
        description="HTTP timeout for a single upstream call",
    )
    kb_dir: Path = Field(default=BUNDLED_KB_DIR, validation_alias="KB_DIR")
    kb_files: list[tuple[str, str]] = Field(
        default_factory=lambda: list(DEFAULT_KB_FILES),
        validation_alias="KB_FILES",
    )
    rag_default_limit: int = Field(default=6, validation_alias="RAG_DEFAULT_LIMIT")
    min_summary_thai_chars: int = Field(default=50, validation_alias="MIN_SUMMARY_THAI_CHARS")
    error_log_max_entries: int | None = Field(
        default=None,
        validation_alias="ERROR_LOG_MAX_ENTRIES",
        description="Cap for the in-memory error log (None keeps every entry)",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("error_log_max_entries")
    @classmethod
    def validate_error_log_cap(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            logger.warning(f"Invalid ERROR_LOG_MAX_ENTRIES '{value}'. Keeping every entry.")
            return None
        return value

    @field_validator("gemini_api_key")
    @classmethod
    def validate_api_key(cls, value: str) -> str:
        """Warn when the Gemini key is missing.

        Readings still work without it; every request falls back to the
        deterministic baseline text.
        """
        if not value:
            logger.warning(
                "GEMINI_API_KEY is not set. AI readings will use baseline fallback text. "
                "Set it in .env file or environment variables to enable Gemini."
            )
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
