# app/features/comics/router.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.errors import NotFoundError
from app.lib.db import get_session
from . import repository
from .schemas import ComicCreate, ComicOut, ComicWithPanels, DeleteResult, PanelCreate, PanelOut

router = APIRouter(prefix="/api", tags=["comics"])

@router.get("/comics", response_model=List[ComicOut])
def list_comics_endpoint(session: Session = Depends(get_session)):
    return repository.list_comics(session)

@router.post("/comics", response_model=ComicOut)
def create_comic_endpoint(req: ComicCreate, session: Session = Depends(get_session)):
    return repository.create_comic(session, title=req.title, description=req.description)

@router.get("/comics/{comic_id}", response_model=ComicWithPanels)
def get_comic_endpoint(comic_id: str, session: Session = Depends(get_session)):
    return repository.get_comic(session, comic_id)

@router.delete("/comics/{comic_id}", response_model=DeleteResult)
def delete_comic_endpoint(comic_id: str, session: Session = Depends(get_session)):
    repository.delete_comic(session, comic_id)
    return DeleteResult(success=True)

@router.post("/comics/{comic_id}/panels", response_model=PanelOut)
def add_panel_endpoint(comic_id: str, req: PanelCreate, session: Session = Depends(get_session)):
    if not repository.comic_exists(session, comic_id):
        raise NotFoundError("comic", comic_id)
    return repository.add_panel(
        session,
        comic_id=comic_id,
        image_url=req.image_url,
        caption=req.caption,
        order_index=req.order_index,
    )
