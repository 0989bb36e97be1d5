# tests/conftest.py
import base64
import json
import types
from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from app.lib import openai_client
from app.lib.db import Store
from app.main import create_app

# -------- Utilities --------
def tiny_png_base64(w: int = 8, h: int = 8) -> str:
    im = Image.new("RGB", (w, h), (200, 40, 40))
    buf = BytesIO()
    im.save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("ascii")

def tiny_png_data_uri() -> str:
    return f"data:image/png;base64,{tiny_png_base64()}"

STORY = {
    "title": "The Brave Cat",
    "panels": [
        {"visualDescription": "A cat on a rooftop at dawn.", "caption": "It all began at sunrise."},
        {"visualDescription": "The cat leaps across a gap.", "caption": "Whoosh!"},
        {"visualDescription": "The cat lands next to a pigeon.", "caption": "Hello, friend."},
        {"visualDescription": "Both watch the city wake up.", "caption": "The end."},
    ],
}

# -------- Mocks for OpenAI --------
class _MockImageData:
    def __init__(self, b64_json):
        self.b64_json = b64_json

class _MockImagesResponse:
    def __init__(self, b64_json):
        self.data = [_MockImageData(b64_json)] if b64_json is not None else []

class _MockMessage:
    def __init__(self, content):
        self.content = content

class _MockChoice:
    def __init__(self, content):
        self.message = _MockMessage(content)

class _MockChatResponse:
    def __init__(self, content):
        self.choices = [_MockChoice(content)]

class FakeOpenAI:
    """Records calls; story/translation/image answers are settable per test."""

    def __init__(self):
        self.story_payload = json.dumps(STORY)
        self.translation = "Olá, mundo"
        self.image_b64 = tiny_png_base64()
        self.calls = []
        self.chat = types.SimpleNamespace(completions=types.SimpleNamespace(create=self._chat_create))
        self.images = types.SimpleNamespace(generate=self._images_generate, edit=self._images_edit)

    def _chat_create(self, model, messages, **kwargs):
        self.calls.append(("chat", {"model": model, "messages": messages, **kwargs}))
        if "translator" in messages[0]["content"]:
            return _MockChatResponse(self.translation)
        return _MockChatResponse(self.story_payload)

    def _images_generate(self, model, prompt, size, n):
        self.calls.append(("generate", {"model": model, "prompt": prompt, "size": size}))
        return _MockImagesResponse(self.image_b64)

    def _images_edit(self, model, prompt, size, n, image):
        self.calls.append(("edit", {"model": model, "prompt": prompt, "size": size, "image": image}))
        return _MockImagesResponse(self.image_b64)

    def calls_of(self, kind):
        return [c for k, c in self.calls if k == kind]

@pytest.fixture(autouse=True)
def fake_openai(monkeypatch):
    """
    Auto-mock the OpenAI client everywhere so tests don't hit the network.
    """
    fake = FakeOpenAI()
    monkeypatch.setattr(openai_client, "_client", fake)
    yield fake

# -------- Store / app --------
@pytest.fixture
def store(tmp_path):
    s = Store(f"sqlite:///{(tmp_path / 'comics.db').as_posix()}")
    s.create_all()
    yield s
    s.dispose()

@pytest.fixture
def session(store):
    with store.session() as s:
        yield s

@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
