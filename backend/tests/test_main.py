"""Entry point — the console script hands the app to uvicorn."""

import uvicorn

import app.main as main_module
from app.config import Settings


def test_run_serves_app_on_configured_address(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))
    monkeypatch.setattr(main_module, "get_settings", lambda: Settings(
        host="0.0.0.0", port=9000,
    ))

    main_module.run()

    assert calls == [(("app.main:app",), {
        "host": "0.0.0.0", "port": 9000, "log_config": None,
    })]
