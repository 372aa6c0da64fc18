from pathlib import Path
from typing import List, Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dsa_mentor.languages import SUPPORTED_LANGUAGES, normalize_language


PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DSA_MENTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3005
    cors_allow_origins: str = "*"  # comma-separated

    # Ollama
    ollama_url: str = "http://127.0.0.1:11434/api/generate"
    ollama_model: str = "llama3"
    inference_timeout: float = 150.0  # seconds; local models are slow
    relay_buffer_size: int = 64

    # Language handling: strict rejects missing/unsupported values,
    # lenient substitutes default_language.
    language_policy: Literal["strict", "lenient"] = "strict"
    default_language: str = "python"

    # Storage
    problems_path: Optional[Path] = None
    storage_path: Path = PACKAGE_DIR / "storage" / "PAResponse.json"

    # Logging
    log_level: str = "INFO"

    @field_validator("default_language")
    @classmethod
    def check_default_language(cls, v: str) -> str:
        normalized = normalize_language(v)
        if normalized is None:
            raise ValueError(
                f"default_language must be one of: {', '.join(SUPPORTED_LANGUAGES)}"
            )
        return normalized

    @field_validator("relay_buffer_size")
    @classmethod
    def check_buffer_size(cls, v: int) -> int:
        return max(1, v)

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]

    @property
    def problem_candidates(self) -> List[Path]:
        """Catalog files to try, in order."""
        if self.problems_path is not None:
            return [self.problems_path]
        return [
            PACKAGE_DIR / "data" / "questions.json",
            Path.cwd() / "questions.json",
        ]
