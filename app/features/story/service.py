# app/features/story/service.py
from typing import Optional
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from app.config import config
from app.errors import GenerationParseError
from app.lib.json_tools import extract_json_block
from app.lib.openai_client import get_client
from app.logger import get_logger
from .prompt import build_story_prompt
from .schemas import Story, empty_story

log = get_logger(__name__)

SYSTEM = (
    "You are a witty comic book writer and storyboard artist. "
    "Return STRICT JSON only: exactly one JSON object with 'title' (string) and 'panels' "
    "(array of objects with 'visualDescription' and 'caption', both strings). "
    "No extra text, no comments, no markdown."
)

def _story_json_schema() -> dict:
    panel = {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "visualDescription": {"type": "string"},
            "caption": {"type": "string"},
        },
        "required": ["visualDescription", "caption"],
    }
    return {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "title": {"type": "string"},
            "panels": {"type": "array", "items": panel},
        },
        "required": ["title", "panels"],
    }

def parse_story(raw: Optional[str]) -> Story:
    """Fence-strip and validate a model answer. Raises GenerationParseError."""
    if not raw or not raw.strip():
        raise GenerationParseError("model returned an empty response")
    cleaned = extract_json_block(raw)
    try:
        return Story.model_validate_json(cleaned)
    except ValidationError as e:
        raise GenerationParseError(f"Model JSON failed validation: {e}") from e

async def generate_story(prompt: str, language: Optional[str] = None) -> Story:
    """
    Turn a free-text prompt into a titled list of panels.
    Unusable answers degrade to an untitled story with no panels; callers
    must treat an empty panel list as a failed generation.
    """
    language = language or config.default_language
    client = get_client()
    # SDK call is blocking; keep it off the event loop
    resp = await run_in_threadpool(
        client.chat.completions.create,
        model=config.openai_text_model,
        temperature=0.8,
        response_format={"type": "json_schema", "json_schema": {"name": "ComicStory", "schema": _story_json_schema(), "strict": True}},
        messages=[
            {"role": "system", "content": SYSTEM},
            {"role": "user", "content": build_story_prompt(prompt=prompt, language=language)},
        ],
    )
    raw = resp.choices[0].message.content if resp.choices else None
    try:
        story = parse_story(raw)
    except GenerationParseError as e:
        log.error(f"Failed to parse story response: {e}\nRaw: {raw!r}")
        return empty_story()
    log.info(f"story {story.title!r} with {len(story.panels)} panels ({language})")
    return story
