# app/features/translate/schemas.py
from typing import List
from pydantic import BaseModel, Field

class TranslateRequest(BaseModel):
    text: str = Field(..., min_length=1)
    target_language: str = Field(..., min_length=1, description="Locale tag or language name")

class TranslateResponse(BaseModel):
    text: str

class Language(BaseModel):
    code: str
    name: str

class LanguagesResponse(BaseModel):
    languages: List[Language]
