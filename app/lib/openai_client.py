# app/lib/openai_client.py
from typing import Optional
from openai import OpenAI
from app.config import config
from app.errors import MissingCredentialError

_client: Optional[OpenAI] = None

def get_client() -> OpenAI:
    """Shared OpenAI client, built on first use. Fails fast when OPENAI_API_KEY is unset."""
    global _client
    if _client is None:
        if not config.openai_api_key:
            raise MissingCredentialError("OPENAI_API_KEY is not set")
        _client = OpenAI(api_key=config.openai_api_key)
    return _client
