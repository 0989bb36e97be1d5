# app/features/generate/schemas.py
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from app.lib.imaging import decode_image_b64

class GenerateComicRequest(BaseModel):
    prompt: str = Field(..., min_length=1, description="Free-text theme for the story")
    language: Optional[str] = Field(None, description="Locale tag for title and captions, e.g. 'pt-BR'")
    # Optional image provided as base64 or data URL (e.g., 'data:image/png;base64,....')
    reference_image: Optional[str] = Field(
        None, description="Optional PNG/JPEG base64 (raw or data URL) the main character should resemble"
    )

    @field_validator("reference_image")
    @classmethod
    def reference_must_decode(cls, v):
        if v is None or not v.strip():
            return None
        decode_image_b64(v)  # ValueError -> 422
        return v
