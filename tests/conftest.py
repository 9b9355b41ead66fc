import pytest
from fastapi.testclient import TestClient

from status_api.config import Settings
from status_api.main import create_app
from status_api.services.cache import ProbeCache
from status_api.services.probe import ProbeResult
from status_api.services.status import StatusService


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class StubExecutor:
    """Returns canned results per URL and counts probes."""

    def __init__(self, results=None, default=ProbeResult(True, 200, 12)):
        self.results = results or {}
        self.default = default
        self.calls = []

    async def probe(self, url: str) -> ProbeResult:
        self.calls.append(url)
        return self.results.get(url, self.default)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def executor():
    return StubExecutor()


@pytest.fixture
def cache(clock):
    return ProbeCache(ttl=20, capacity=100, clock=clock)


@pytest.fixture
def service(cache, executor):
    return StatusService(cache, executor)


@pytest.fixture
def static_root(tmp_path):
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_text("<h1>home</h1>", encoding="utf-8")
    (root / "services.json").write_text('[{"name": "nas", "url": "nas.local"}]', encoding="utf-8")
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "notes.txt").write_text("plain", encoding="utf-8")
    (tmp_path / "secret.txt").write_text("outside", encoding="utf-8")
    return root


@pytest.fixture
def settings(static_root):
    return Settings(static_root=str(static_root), batch_max=3)


@pytest.fixture
def client(settings, service):
    app = create_app(settings=settings, status_service=service)
    with TestClient(app) as c:
        yield c
