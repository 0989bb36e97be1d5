# app/features/comics/schemas.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class ComicCreate(BaseModel):
    title: str = Field(..., description="Comic title")
    description: str = Field("", description="The prompt the comic was generated from")

class ComicOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None

class PanelCreate(BaseModel):
    image_url: str = Field(..., description="Panel image as a data URI")
    caption: str = ""
    order_index: int = Field(..., ge=0, description="Position of the panel inside the comic")

class PanelOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    comic_id: str
    image_url: Optional[str] = None
    caption: Optional[str] = None
    order_index: int

class ComicWithPanels(ComicOut):
    panels: List[PanelOut] = Field(default_factory=list)

class DeleteResult(BaseModel):
    success: bool = True
