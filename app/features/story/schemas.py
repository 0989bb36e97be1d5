# app/features/story/schemas.py
from typing import List
from pydantic import BaseModel, ConfigDict, Field

class StoryPanel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    visual_description: str = Field(..., alias="visualDescription", description="Detailed visual description for image generation")
    caption: str = Field(..., description="Caption or speech balloon text")

class Story(BaseModel):
    title: str
    panels: List[StoryPanel] = Field(default_factory=list)

UNTITLED = "Untitled"

def empty_story() -> Story:
    return Story(title=UNTITLED, panels=[])
