# tests/test_generate_endpoint.py
import dataclasses
import json

from app.lib import openai_client
from tests.conftest import STORY, tiny_png_data_uri


def test_generate_comic_persists_every_panel_in_story_order(client, fake_openai):
    r = client.post("/api/comics/generate", json={"prompt": "a brave cat", "language": "en"})
    assert r.status_code == 200, r.text
    data = r.json()

    assert data["title"] == STORY["title"]
    assert data["description"] == "a brave cat"
    assert [p["order_index"] for p in data["panels"]] == [0, 1, 2, 3]
    assert [p["caption"] for p in data["panels"]] == [p["caption"] for p in STORY["panels"]]
    assert all(p["image_url"].startswith("data:image/png;base64,") for p in data["panels"])

    # one story call, then one image call per panel, in order
    assert len(fake_openai.calls_of("chat")) == 1
    prompts = [c["prompt"] for c in fake_openai.calls_of("generate")]
    assert len(prompts) == 4
    for prompt, panel in zip(prompts, STORY["panels"]):
        assert panel["visualDescription"] in prompt

    stored = client.get(f"/api/comics/{data['id']}").json()
    assert len(stored["panels"]) == 4
    assert [c["id"] for c in client.get("/api/comics").json()] == [data["id"]]


def test_generate_with_reference_image_uses_edit(client, fake_openai):
    r = client.post(
        "/api/comics/generate",
        json={"prompt": "me as a pirate", "reference_image": tiny_png_data_uri()},
    )
    assert r.status_code == 200, r.text
    assert len(fake_openai.calls_of("edit")) == 4
    assert fake_openai.calls_of("generate") == []


def test_story_without_panels_aborts_before_creating_a_comic(client, fake_openai):
    fake_openai.story_payload = json.dumps({"title": "Empty", "panels": []})
    r = client.post("/api/comics/generate", json={"prompt": "nothing"})
    assert r.status_code == 502
    assert fake_openai.calls_of("generate") == []
    assert client.get("/api/comics").json() == []


def test_unparseable_story_aborts(client, fake_openai):
    fake_openai.story_payload = "NOT JSON AT ALL"
    r = client.post("/api/comics/generate", json={"prompt": "nothing"})
    assert r.status_code == 502
    assert client.get("/api/comics").json() == []


def test_missing_image_leaves_no_partial_comic(client, fake_openai):
    fake_openai.image_b64 = None
    r = client.post("/api/comics/generate", json={"prompt": "a brave cat"})
    assert r.status_code == 502
    assert "panel 1" in r.json()["detail"]
    assert client.get("/api/comics").json() == []


def test_invalid_reference_image_is_rejected(client, fake_openai):
    r = client.post("/api/comics/generate", json={"prompt": "x", "reference_image": "not-base64!!"})
    assert r.status_code == 422
    assert fake_openai.calls == []


def test_missing_credential_is_reported(client, monkeypatch):
    monkeypatch.setattr(openai_client, "_client", None)
    monkeypatch.setattr(openai_client, "config", dataclasses.replace(openai_client.config, openai_api_key=""))
    r = client.post("/api/comics/generate", json={"prompt": "a brave cat"})
    assert r.status_code == 503
    assert "OPENAI_API_KEY" in r.json()["detail"]
