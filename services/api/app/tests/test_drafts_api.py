import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.settings import Settings


@pytest.fixture
def client(tmp_path):
    app = create_app(Settings(openai_api_key="test-key", drafts_path=str(tmp_path / "drafts.json")))
    return TestClient(app)


def test_drafts_start_empty(client):
    r = client.get("/api/drafts")
    assert r.status_code == 200
    assert r.json() == []


def test_create_and_list(client):
    r = client.post("/api/drafts", json={"content": "https://example.com", "outputFormat": "bullets"})
    assert r.status_code == 201
    created = r.json()
    assert created["content"] == "https://example.com"
    assert created["outputFormat"] == "bullets"
    assert "summary" not in created

    r = client.post("/api/drafts", json={"content": "second", "outputFormat": "tweet", "summary": "done"})
    second = r.json()

    drafts = client.get("/api/drafts").json()
    assert [d["id"] for d in drafts] == [second["id"], created["id"]]
    assert drafts[0]["summary"] == "done"
    assert drafts[0]["updatedLabel"] == "0 minutes ago"


def test_drafts_persist_to_configured_file(tmp_path):
    settings = Settings(openai_api_key="test-key", drafts_path=str(tmp_path / "drafts.json"))
    TestClient(create_app(settings)).post("/api/drafts", json={"content": "keep", "outputFormat": "summary"})

    drafts = TestClient(create_app(settings)).get("/api/drafts").json()
    assert [d["content"] for d in drafts] == ["keep"]


def test_patch_draft(client):
    draft = client.post("/api/drafts", json={"content": "a", "outputFormat": "summary", "summary": "old"}).json()

    r = client.patch(f"/api/drafts/{draft['id']}", json={"outputFormat": "thread"})
    assert r.status_code == 200
    assert r.json()["outputFormat"] == "thread"
    assert r.json()["summary"] == "old"

    r = client.patch(f"/api/drafts/{draft['id']}", json={"summary": None})
    assert r.status_code == 200
    assert "summary" not in r.json()


def test_patch_rejects_null_content(client):
    draft = client.post("/api/drafts", json={"content": "a", "outputFormat": "summary"}).json()
    r = client.patch(f"/api/drafts/{draft['id']}", json={"content": None})
    assert r.status_code == 400


def test_patch_unknown_draft(client):
    r = client.patch("/api/drafts/missing", json={"content": "x"})
    assert r.status_code == 404
    assert r.json() == {"error": "Draft not found."}


def test_delete_draft(client):
    keep = client.post("/api/drafts", json={"content": "keep", "outputFormat": "summary"}).json()
    gone = client.post("/api/drafts", json={"content": "gone", "outputFormat": "summary"}).json()

    assert client.delete(f"/api/drafts/{gone['id']}").status_code == 204
    assert [d["id"] for d in client.get("/api/drafts").json()] == [keep["id"]]

    r = client.delete(f"/api/drafts/{gone['id']}")
    assert r.status_code == 404
    assert [d["id"] for d in client.get("/api/drafts").json()] == [keep["id"]]
