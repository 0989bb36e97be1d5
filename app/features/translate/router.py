# app/features/translate/router.py
from fastapi import APIRouter
from .schemas import Language, LanguagesResponse, TranslateRequest, TranslateResponse
from .service import SUPPORTED_LANGUAGES, translate_text

router = APIRouter(prefix="/api", tags=["translate"])

@router.post("/translate", response_model=TranslateResponse)
async def translate_endpoint(req: TranslateRequest) -> TranslateResponse:
    return TranslateResponse(text=await translate_text(req.text, req.target_language))

@router.get("/languages", response_model=LanguagesResponse)
async def languages_endpoint() -> LanguagesResponse:
    return LanguagesResponse(languages=[Language(code=c, name=n) for c, n in SUPPORTED_LANGUAGES])
