# app/__init__.py
from .config import config
from .logger import get_logger
from .errors import (
    ComicStudioError,
    GenerationError,
    GenerationParseError,
    MissingCredentialError,
    NotFoundError,
    StoreError,
)
from .main import app, create_app


__all__ = ["app",
           "create_app",
           "config",
           "get_logger",
           "ComicStudioError",
           "GenerationError",
           "GenerationParseError",
           "MissingCredentialError",
           "NotFoundError",
           "StoreError",
           ]
