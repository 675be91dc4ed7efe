# tests/test_config.py
from fastapi.testclient import TestClient

from product_api.config import Settings
from product_api.main import create_app


def test_defaults(monkeypatch):
    for name in ("PORT", "AUTH_TOKEN", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.port == 3000
    assert cfg.expected_authorization == "Bearer secret-token"
    assert cfg.default_page == 1
    assert cfg.default_limit == 2

def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8085")
    assert Settings(_env_file=None).port == 8085

def test_token_from_environment(monkeypatch):
    monkeypatch.setenv("AUTH_TOKEN", "rotated")
    app = create_app(settings=Settings(_env_file=None))
    with TestClient(app) as c:
        assert c.get("/api/products", headers={"Authorization": "Bearer secret-token"}).status_code == 403
        assert c.get("/api/products", headers={"Authorization": "Bearer rotated"}).status_code == 200
