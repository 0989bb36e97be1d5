# app/features/generate/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.features.comics.schemas import ComicWithPanels
from app.lib.db import get_session
from app.logger import get_logger
from .schemas import GenerateComicRequest
from .service import generate_comic

router = APIRouter(prefix="/api", tags=["generate"])
log = get_logger(__name__)

@router.post("/comics/generate", response_model=ComicWithPanels)
async def generate_comic_endpoint(req: GenerateComicRequest, session: Session = Depends(get_session)):
    log.info(f"generating comic for prompt {req.prompt[:60]!r}")
    return await generate_comic(session, req)
