from fastapi.testclient import TestClient

from api import server
from core.models import ScanReport

client = TestClient(server.app)


def test_health():
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_bad_port_spec_is_400():
    resp = client.post("/api/scan", json={"target": "127.0.0.1", "ports": "abc"})
    assert resp.status_code == 400
    assert "abc" in resp.json()["detail"]


def test_invalid_concurrency_is_422():
    resp = client.post("/api/scan", json={"target": "127.0.0.1", "concurrency": 0})
    assert resp.status_code == 422


def test_scan_returns_report(monkeypatch):
    calls = {}

    async def fake_run_scan(target, ports_spec=None, concurrency=None, timeout_ms=None):
        calls.update(target=target, ports=ports_spec, concurrency=concurrency, timeout_ms=timeout_ms)
        return ScanReport(
            target=target,
            ip="127.0.0.1",
            ports_scanned=1,
            findings=[{"host": "127.0.0.1", "port": 22, "banner": "SSH-2.0-test"}],
        )

    monkeypatch.setattr(server, "run_scan", fake_run_scan)
    resp = client.post("/api/scan", json={"target": "localhost", "ports": "22", "timeout_ms": 300})
    assert resp.status_code == 200
    body = resp.json()
    assert body["findings"] == [{"host": "127.0.0.1", "port": 22, "status": "open", "banner": "SSH-2.0-test"}]
    assert calls == {"target": "localhost", "ports": "22", "concurrency": None, "timeout_ms": 300}
