from __future__ import annotations

from fastapi.testclient import TestClient

from typed_config import ConfigField


def test_app_smoke_routes(reload_endpoints):
    import app as app_module

    client = TestClient(app_module.create_app())

    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

    r = client.get("/config")
    assert r.status_code == 200
    assert r.json() == {}


def test_lifespan_loads_on_startup_and_saves_on_shutdown(monkeypatch, reload_endpoints, registry, sandbox_config):
    import app as app_module

    sandbox_config.mkdir()
    (sandbox_config / "app.json").write_text('{"volume":7}')
    volume = ConfigField("volume", 80, registry=registry)

    monkeypatch.setenv("CONFIG_SAVE_ON_SHUTDOWN", "true")
    monkeypatch.setattr(reload_endpoints, "SETTINGS", reload_endpoints.get_settings())

    with TestClient(app_module.create_app()) as client:
        assert volume.value() == 7
        client.put("/config", content='{"volume":8}')

    assert (sandbox_config / "app.json").read_text() == '{"volume":8}'


def test_lifespan_survives_incompatible_file(reload_endpoints, registry, sandbox_config):
    import app as app_module

    sandbox_config.mkdir()
    (sandbox_config / "app.json").write_text('{"volume":"loud"}')
    volume = ConfigField("volume", 80, registry=registry)

    with TestClient(app_module.create_app()) as client:
        assert client.get("/config").json() == {"volume": 80}
    assert volume.value() == 80
