"""
Application configuration management using Pydantic Settings.
"""
import logging
from typing import Literal, Optional, Dict, Any
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from dotenv import load_dotenv

# Load .env first
load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Wireframe service settings"""

    # -------------------------
    # APPLICATION METADATA & RUNTIME
    # -------------------------
    app_name: str = "Wireframe Generation Service"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_directory: str = "logs"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    host: str = "0.0.0.0"
    port: int = 8000

    # -------------------------
    # GENERATION BACKEND
    # -------------------------
    generation_backend: Literal["ollama", "text_completion", "openai"] = "ollama"
    generation_timeout: float = 120.0
    generation_temperature: float = 0.7
    generation_max_tokens: int = 4096

    ollama_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.1:latest"

    text_completion_url: str = "http://localhost:8080/v1/complete"
    text_completion_api_key: Optional[str] = None

    openai_base_url: str = "https://api.groq.com/openai/v1"
    openai_model: str = "llama-3.1-70b-versatile"
    openai_api_key: Optional[str] = None

    # -------------------------
    # WIREFRAME DOCUMENTS
    # -------------------------
    metadata_version: str = "1.0"
    description_excerpt_length: int = 100

    # -------------------------
    # VALIDATORS
    # -------------------------
    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return str(v).upper()

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v: str) -> str:
        valid_envs = ["development", "staging", "production"]
        if v not in valid_envs:
            logger.warning(f"Invalid environment '{v}', defaulting to 'development'")
            return "development"
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def llm_config(self) -> Dict[str, Any]:
        return {
            "backend": self.generation_backend,
            "request_timeout": self.generation_timeout,
            "temperature": self.generation_temperature,
            "max_tokens_default": self.generation_max_tokens,
            "ollama_url": self.ollama_url,
            "ollama_model": self.ollama_model,
            "text_completion_url": self.text_completion_url,
            "text_completion_api_key": self.text_completion_api_key,
            "openai_base_url": self.openai_base_url,
            "openai_model": self.openai_model,
            "openai_api_key": self.openai_api_key,
        }

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="APP_",
        validate_default=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    logger.info("Initializing settings...")
    return Settings()


settings = get_settings()
