"""Tests for the HTTP API."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from smart_variables import suggest as suggest_module
from smart_variables.generation import GenerationError
from smart_variables.models import GenerationErrorCategory, NamingStyle
from smart_variables.server import app, get_service
from smart_variables.store import ConfigStore
from smart_variables.suggest import SuggestionService


class StubGenerator:
    def __init__(self, reply: list[str] | None = None, error: GenerationError | None = None) -> None:
        self.reply = reply or []
        self.error = error

    async def generate(self, meaning: str, style: NamingStyle, count: int = 6, context: object = None) -> list[str]:
        if self.error is not None:
            raise self.error
        return self.reply[:count]

    async def __aenter__(self) -> "StubGenerator":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None


@pytest.fixture
def store(tmp_path: Path) -> ConfigStore:
    return ConfigStore(
        global_dir=tmp_path / "global",
        workspace_dir=tmp_path / "workspace",
        defaults={"preferred_style": "auto", "api_key": "sk-secret", "base_url": "http://llm", "model_id": "m"},
    )


@pytest.fixture
def stub() -> StubGenerator:
    return StubGenerator(["userName", "currentUser", "activeUser"])


@pytest.fixture
def client(store: ConfigStore, stub: StubGenerator) -> Iterator[TestClient]:
    service = SuggestionService(store=store, generator_factory=lambda: stub)
    app.dependency_overrides[get_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


class TestInferEndpoint:
    def test_java_constant(self, client: TestClient) -> None:
        resp = client.post(
            "/style/infer",
            json={
                "text": "public class Limits {\n    public static final int MAX = 1;\n}",
                "language": "java",
                "line": 1,
            },
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["style"] == "upper"
        assert body["language"] == "java"
        assert body["default_style"] == "camel"
        assert body["in_class"] is True

    def test_alias_resolved(self, client: TestClient) -> None:
        resp = client.post("/style/infer", json={"text": "x = 1\n", "language": "py", "line": 1})
        body = resp.json()
        assert body["language"] == "python"
        assert body["style"] == "snake"

    def test_negative_line_rejected(self, client: TestClient) -> None:
        resp = client.post("/style/infer", json={"text": "", "language": "python", "line": -1})
        assert resp.status_code == 422

    def test_snapshot_built_once(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[int] = []
        real = suggest_module.build_context

        def counting(*args, **kwargs):
            calls.append(1)
            return real(*args, **kwargs)

        monkeypatch.setattr(suggest_module, "build_context", counting)
        resp = client.post("/style/infer", json={"text": "x = 1\n", "language": "python", "line": 1})
        assert resp.status_code == 200
        assert len(calls) == 1


class TestSuggestEndpoint:
    def test_suggest(self, client: TestClient) -> None:
        resp = client.post(
            "/names/suggest",
            json={"text": "let userId = 1;\n", "language": "javascript", "line": 1, "meaning": "current user", "count": 2},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["style"] == "camel"
        assert body["candidates"] == ["userName", "currentUser"]
        assert body["language"] == "javascript"

    def test_forced_style(self, client: TestClient) -> None:
        resp = client.post(
            "/names/suggest",
            json={"text": "", "language": "python", "meaning": "user", "style": "upper"},
        )
        assert resp.json()["style"] == NamingStyle.UPPER.value

    def test_blank_meaning(self, client: TestClient) -> None:
        resp = client.post("/names/suggest", json={"text": "", "language": "python", "meaning": "   "})
        assert resp.status_code == 400

    @pytest.mark.parametrize(
        ("category", "status"),
        [
            (GenerationErrorCategory.MISSING_API_KEY, 422),
            (GenerationErrorCategory.RATE_LIMITED, 502),
        ],
    )
    def test_generation_errors(
        self, client: TestClient, stub: StubGenerator, category: GenerationErrorCategory, status: int
    ) -> None:
        stub.error = GenerationError("boom", category)
        resp = client.post("/names/suggest", json={"text": "", "language": "python", "meaning": "user"})
        assert resp.status_code == status
        assert resp.json()["detail"] == {"message": "boom", "category": category.value}


class TestInsertEndpoint:
    def test_insert_at_cursor(self, client: TestClient) -> None:
        resp = client.post(
            "/names/insert",
            json={"text": "def f():\n    \n", "language": "python", "line": 1, "character": 4, "candidate": "total"},
        )
        assert resp.status_code == 200
        assert resp.json() == {"text": "def f():\n    total\n", "line": 1, "character": 9}

    def test_line_outside_document(self, client: TestClient) -> None:
        resp = client.post(
            "/names/insert",
            json={"text": "a\nb", "language": "python", "line": 5, "candidate": "total"},
        )
        assert resp.status_code == 400
        assert "outside the document" in resp.json()["detail"]

    def test_empty_candidate_rejected(self, client: TestClient) -> None:
        resp = client.post("/names/insert", json={"text": "", "language": "python", "candidate": ""})
        assert resp.status_code == 422


class TestConfigEndpoints:
    def test_mode_toggle(self, client: TestClient) -> None:
        assert client.get("/config/mode").json() == {"preferred_style": "auto"}
        assert client.post("/config/mode/toggle").json() == {"preferred_style": "ask"}
        assert client.get("/config/mode").json() == {"preferred_style": "ask"}

    def test_config_hides_api_key(self, client: TestClient) -> None:
        body = client.get("/config").json()
        assert body["api_key_configured"] is True
        assert "sk-secret" not in str(body)
        assert "python" in body["languages"]
