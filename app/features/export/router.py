# app/features/export/router.py
import re
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.features.comics import repository
from app.lib.db import get_session
from app.lib.pdf import make_comic_pdf

router = APIRouter(prefix="/api", tags=["export"])

def _slugify(s: str) -> str:
    return re.sub(r"[^a-zA-Z0-9]+", "-", (s or "").strip().lower()).strip("-") or "comic"

@router.get("/comics/{comic_id}/pdf")
def export_pdf_endpoint(comic_id: str, session: Session = Depends(get_session)):
    comic = repository.get_comic(session, comic_id)
    pdf = make_comic_pdf(comic.title, comic.panels)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{_slugify(comic.title)}.pdf"'},
    )
