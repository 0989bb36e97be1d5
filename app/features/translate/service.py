# app/features/translate/service.py
from fastapi.concurrency import run_in_threadpool

from app.config import config
from app.lib.openai_client import get_client
from app.logger import get_logger

log = get_logger(__name__)

SUPPORTED_LANGUAGES = [
    ("pt-BR", "Português (Brasil)"),
    ("en", "English"),
    ("es", "Español"),
    ("fr", "Français"),
    ("ja", "日本語"),
]

SYSTEM = "You are a professional translator. Return only the translated text, nothing else."

async def translate_text(text: str, target_language: str) -> str:
    client = get_client()
    resp = await run_in_threadpool(
        client.chat.completions.create,
        model=config.openai_text_model,
        temperature=0.2,
        messages=[
            {"role": "system", "content": SYSTEM},
            {"role": "user", "content": f'Translate the following text into "{target_language}":\n\n{text}'},
        ],
    )
    out = (resp.choices[0].message.content or "").strip() if resp.choices else ""
    log.debug(f"translated {len(text)} chars into {target_language}")
    return out
