# tests/test_panel_image_service.py
import types

import pytest

from app.features.panel_image.prompt import LIKENESS_INSTRUCTION
from app.features.panel_image.service import first_inline_image, generate_panel_image
from tests.conftest import tiny_png_base64, tiny_png_data_uri


@pytest.mark.asyncio
async def test_generate_without_reference_uses_generate(fake_openai):
    image = await generate_panel_image("A cat on a rooftop")
    assert image == f"data:image/png;base64,{fake_openai.image_b64}"

    assert fake_openai.calls_of("edit") == []
    call = fake_openai.calls_of("generate")[0]
    assert "A cat on a rooftop" in call["prompt"]
    assert LIKENESS_INSTRUCTION not in call["prompt"]
    assert call["size"] == "1024x1024"


@pytest.mark.asyncio
async def test_generate_with_reference_attaches_image_and_asks_for_likeness(fake_openai):
    image = await generate_panel_image("A cat on a rooftop", tiny_png_data_uri())
    assert image.startswith("data:image/png;base64,")

    assert fake_openai.calls_of("generate") == []
    call = fake_openai.calls_of("edit")[0]
    assert call["prompt"].endswith(LIKENESS_INSTRUCTION)
    filename, data, content_type = call["image"]
    assert content_type == "image/png"
    assert data.startswith(b"\x89PNG")


@pytest.mark.asyncio
async def test_raw_base64_reference_is_accepted(fake_openai):
    await generate_panel_image("scene", tiny_png_base64())
    assert len(fake_openai.calls_of("edit")) == 1


@pytest.mark.asyncio
async def test_response_without_inline_image_is_none(fake_openai):
    fake_openai.image_b64 = None
    assert await generate_panel_image("A cat on a rooftop") is None


@pytest.mark.asyncio
async def test_unsupported_reference_is_rejected(fake_openai):
    with pytest.raises(ValueError):
        await generate_panel_image("scene", "data:image/png;base64,bm90IGFuIGltYWdl")


def test_first_inline_image_skips_parts_without_payload():
    resp = types.SimpleNamespace(data=[
        types.SimpleNamespace(b64_json=None, url="https://example.invalid/x.png"),
        types.SimpleNamespace(b64_json="QUJD"),
    ])
    assert first_inline_image(resp) == "data:image/png;base64,QUJD"
    assert first_inline_image(types.SimpleNamespace(data=None)) is None
