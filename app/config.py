# app/config.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}

def _env_csv(name: str, default: str = "*") -> List[str]:
    raw = os.getenv(name, default)
    return [x.strip() for x in raw.split(",") if x.strip()]

@dataclass(frozen=True)
class Config:
    # OpenAI
    openai_api_key: str
    openai_text_model: str
    openai_image_model: str
    image_size: str  # valid: 1024x1024, 1024x1536, 1536x1024, auto
    # Storage
    base_output_dir: Path
    database_url: str
    db_echo: bool
    # API / CORS
    allowed_origins: List[str]
    static_dir: Path                        # built front-end bundle, mounted only if it exists
    # Stories
    default_language: str
    # Logging
    log_level: str

def _default_database_url(base: Path) -> str:
    return f"sqlite:///{(base / 'comics.db').as_posix()}"

def load_config() -> Config:
    base = Path(__file__).resolve().parent / "output"
    return Config(
        openai_api_key = os.getenv("OPENAI_API_KEY", ""),
        openai_text_model = os.getenv("OPENAI_TEXT_MODEL", "gpt-4o-mini"),
        openai_image_model = os.getenv("OPENAI_IMAGE_MODEL", "gpt-image-1"),
        image_size = os.getenv("IMAGE_SIZE", "1024x1024"),
        base_output_dir = base,
        database_url = os.getenv("DATABASE_URL") or _default_database_url(base),
        db_echo = _env_bool("DB_ECHO", False),
        allowed_origins = _env_csv("ALLOWED_ORIGINS", "*"),
        static_dir = Path(os.getenv("STATIC_DIR", "dist")),
        default_language = os.getenv("DEFAULT_LANGUAGE", "pt-BR"),
        log_level = os.getenv("LOG_LEVEL", "INFO"),
    )

# Load once and ensure output directory exists (default sqlite file lives there)
config = load_config()
config.base_output_dir.mkdir(parents=True, exist_ok=True)
