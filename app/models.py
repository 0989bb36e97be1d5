# app/models.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from app.lib.db import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Comic(Base):
    __tablename__ = "comics"

    id = Column(String(36), primary_key=True, default=_new_id)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)  # the prompt the comic was generated from
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)

    panels = relationship(
        "Panel",
        back_populates="comic",
        order_by="Panel.order_index",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Comic(id={self.id}, title={self.title!r})>"


class Panel(Base):
    __tablename__ = "panels"
    __table_args__ = (
        UniqueConstraint("comic_id", "order_index", name="uq_panels_comic_order"),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    comic_id = Column(String(36), ForeignKey("comics.id", ondelete="CASCADE"), nullable=False, index=True)
    image_url = Column(Text, nullable=True)  # data URI, not a remote URL
    caption = Column(Text, nullable=True)
    order_index = Column(Integer, nullable=False)

    comic = relationship("Comic", back_populates="panels")

    def __repr__(self):
        return f"<Panel(id={self.id}, comic_id={self.comic_id}, order={self.order_index})>"
