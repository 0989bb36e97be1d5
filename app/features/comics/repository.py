# app/features/comics/repository.py
from typing import Iterable, List, NamedTuple

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.errors import NotFoundError, StoreError
from app.logger import get_logger
from app.models import Comic, Panel

log = get_logger(__name__)


class PanelDraft(NamedTuple):
    image_url: str
    caption: str
    order_index: int


def _commit(session: Session, what: str) -> None:
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        log.error(f"store write failed ({what}): {e}")
        raise StoreError(f"Failed to write {what}: {e.__class__.__name__}") from e


def list_comics(session: Session) -> List[Comic]:
    stmt = select(Comic).order_by(Comic.created_at.desc())
    return list(session.scalars(stmt))


def create_comic(session: Session, title: str, description: str) -> Comic:
    comic = Comic(title=title, description=description)
    session.add(comic)
    _commit(session, "comic")
    log.info(f"created comic {comic.id} ({title!r})")
    return comic


def get_comic(session: Session, comic_id: str) -> Comic:
    """Comic with its panels, ordered by order_index."""
    stmt = select(Comic).options(selectinload(Comic.panels)).where(Comic.id == comic_id)
    comic = session.scalars(stmt).first()
    if comic is None:
        raise NotFoundError("comic", comic_id)
    return comic


def comic_exists(session: Session, comic_id: str) -> bool:
    return session.get(Comic, comic_id) is not None


def delete_comic(session: Session, comic_id: str) -> bool:
    """
    Delete panels first, then the comic. Missing ids are not an error;
    returns whether a comic row was removed.
    """
    try:
        session.execute(delete(Panel).where(Panel.comic_id == comic_id))
        result = session.execute(delete(Comic).where(Comic.id == comic_id))
    except SQLAlchemyError as e:
        session.rollback()
        log.error(f"store write failed (comic deletion): {e}")
        raise StoreError(f"Failed to write comic deletion: {e.__class__.__name__}") from e
    _commit(session, "comic deletion")
    removed = bool(result.rowcount)
    if removed:
        log.info(f"deleted comic {comic_id}")
    else:
        log.debug(f"delete of unknown comic {comic_id} ignored")
    return removed


def add_panel(session: Session, comic_id: str, image_url: str, caption: str, order_index: int) -> Panel:
    panel = Panel(comic_id=comic_id, image_url=image_url, caption=caption, order_index=order_index)
    session.add(panel)
    _commit(session, "panel")
    log.debug(f"added panel {order_index} to comic {comic_id}")
    return panel


def create_comic_with_panels(
    session: Session,
    title: str,
    description: str,
    panels: Iterable[PanelDraft],
) -> Comic:
    """Comic + every panel in one transaction; nothing is kept if any insert fails."""
    comic = Comic(title=title, description=description)
    comic.panels = [
        Panel(image_url=p.image_url, caption=p.caption, order_index=p.order_index)
        for p in sorted(panels, key=lambda p: p.order_index)
    ]
    session.add(comic)
    _commit(session, "comic with panels")
    log.info(f"created comic {comic.id} with {len(comic.panels)} panels")
    return comic
