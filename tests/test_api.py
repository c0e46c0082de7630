import pytest
import src.graph.collector as collector_module
from src.api.main import app, service
from src.graph.worktree import Worktree
from httpx import ASGITransport, AsyncClient

import pytest_asyncio

RECORDS = (
    "bbbb2222\x1faaaa1111\x1fJane\x1fj@x\x1fnow\x1f2024-05-02T10:00:00Z\x1f1714644000\x1fSecond\x1fHEAD -> main\x1e\n"
    "aaaa1111\x1f\x1fJane\x1fj@x\x1fyesterday\x1f2024-05-01T10:00:00Z\x1f1714557600\x1fInitial\x1ftag: v1\x1e"
)

# Fixture for async client
@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

# Point the global service at a temporary worktree and a fake git
@pytest.fixture
def mock_git(tmp_path, monkeypatch):
    monkeypatch.setattr(service, "worktree", Worktree(root_path=tmp_path, env={}))
    monkeypatch.setattr(Worktree, "which", lambda self, name: "/usr/bin/git")
    calls = []

    def run(cmd, **kwargs):
        calls.append(cmd)
        return collector_module.subprocess.CompletedProcess(cmd, 0, RECORDS.encode(), b"")

    monkeypatch.setattr(collector_module.subprocess, "run", run)
    return calls

@pytest.mark.asyncio
async def test_health(client, mock_git, tmp_path):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "worktree": str(tmp_path)}

@pytest.mark.asyncio
async def test_get_graph(client, mock_git):
    response = await client.get("/api/graph")
    assert response.status_code == 200
    assert "--max-count=401" in mock_git[0]
    data = response.json()
    assert data["truncated"] is False
    assert [c["oid"] for c in data["commits"]] == ["bbbb2222", "aaaa1111"]
    assert data["edges"] == [{"child": "bbbb2222", "parent": "aaaa1111"}]
    assert data["commits"][0]["decorations"]["head"] == "main"
    assert data["commits"][1]["decorations"]["tags"] == ["v1"]

@pytest.mark.asyncio
async def test_get_graph_truncated(client, mock_git):
    response = await client.get("/api/graph", params={"limit": 1})
    assert response.status_code == 200
    assert "--max-count=2" in mock_git[0]
    data = response.json()
    assert data["truncated"] is True
    assert len(data["commits"]) == 1

@pytest.mark.asyncio
async def test_get_graph_clamps_limit(client, mock_git):
    response = await client.get("/api/graph", params={"limit": -4})
    assert response.status_code == 200
    assert "--max-count=2" in mock_git[0]

@pytest.mark.asyncio
async def test_get_graph_git_failure(client, mock_git, monkeypatch):
    def run(cmd, **kwargs):
        return collector_module.subprocess.CompletedProcess(cmd, 128, b"", b"fatal: not a git repository")

    monkeypatch.setattr(collector_module.subprocess, "run", run)
    response = await client.get("/api/graph")
    assert response.status_code == 502
    assert response.json()["detail"] == "git log exited with an error: fatal: not a git repository"

@pytest.mark.asyncio
async def test_get_graph_without_git(client, tmp_path, monkeypatch):
    monkeypatch.setattr(service, "worktree", Worktree(root_path=tmp_path, env={"PATH": str(tmp_path)}))
    response = await client.get("/api/graph")
    assert response.status_code == 503

@pytest.mark.asyncio
async def test_run_git_graph_command(client, mock_git):
    response = await client.post("/api/commands/git-graph", json={"args": ["1"]})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert '"truncated": true' in response.text

@pytest.mark.asyncio
async def test_run_unknown_command(client, mock_git):
    response = await client.post("/api/commands/git-log", json={"args": []})
    assert response.status_code == 400
    assert response.json()["detail"] == "unknown slash command `git-log`"
