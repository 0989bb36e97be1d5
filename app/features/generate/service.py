# app/features/generate/service.py
from typing import List

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from app.errors import GenerationError
from app.features.comics import repository
from app.features.comics.repository import PanelDraft
from app.features.panel_image.service import generate_panel_image
from app.features.story.service import generate_story
from app.logger import get_logger
from app.models import Comic
from .schemas import GenerateComicRequest

log = get_logger(__name__)


async def generate_comic(session: Session, req: GenerateComicRequest) -> Comic:
    """
    Story -> one image per panel (sequentially) -> single commit.
    Panels are staged in memory, so a failure anywhere leaves no comic behind.
    """
    story = await generate_story(req.prompt, req.language)
    if not story.panels:
        raise GenerationError("Story generation returned no panels")

    total = len(story.panels)
    staged: List[PanelDraft] = []
    for idx, panel in enumerate(story.panels):
        log.info(f"rendering panel {idx + 1}/{total} of {story.title!r}")
        image = await generate_panel_image(panel.visual_description, req.reference_image)
        if image is None:
            raise GenerationError(f"Image generation returned nothing for panel {idx + 1}")
        staged.append(PanelDraft(image_url=image, caption=panel.caption, order_index=idx))

    return await run_in_threadpool(
        repository.create_comic_with_panels,
        session,
        title=story.title,
        description=req.prompt,
        panels=staged,
    )
