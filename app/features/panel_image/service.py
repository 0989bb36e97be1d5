# app/features/panel_image/service.py
from typing import Any, Optional

from fastapi.concurrency import run_in_threadpool

from app.config import config
from app.lib.imaging import decode_image_b64, to_data_uri
from app.lib.openai_client import get_client
from app.logger import get_logger
from .prompt import build_panel_image_prompt

log = get_logger(__name__)


def first_inline_image(resp: Any) -> Optional[str]:
    """First base64 payload in an images response, as a PNG data URI; None if there is none."""
    for item in getattr(resp, "data", None) or []:
        b64 = getattr(item, "b64_json", None)
        if b64:
            return to_data_uri(b64)
    return None


async def generate_panel_image(description: str, reference_image: Optional[str] = None) -> Optional[str]:
    """
    Render one panel.
    - With a reference image -> images.edit, the reference attached for likeness
    - Else -> images.generate
    Returns a data URI, or None when the response carries no image.
    """
    client = get_client()
    prompt = build_panel_image_prompt(description=description, with_reference=bool(reference_image))
    log.debug(f"panel prompt is: {prompt}")

    if reference_image:
        data, content_type = decode_image_b64(reference_image)
        ext = "png" if content_type == "image/png" else "jpg"
        resp = await run_in_threadpool(
            client.images.edit,
            model=config.openai_image_model,
            prompt=prompt,
            size=config.image_size,
            n=1,
            image=(f"reference.{ext}", data, content_type),
        )
    else:
        resp = await run_in_threadpool(
            client.images.generate,
            model=config.openai_image_model,
            prompt=prompt,
            size=config.image_size,
            n=1,
        )

    image = first_inline_image(resp)
    if image is None:
        log.warning("image response contained no inline image")
    return image
