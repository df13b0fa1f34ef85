"""Tests for the uvicorn entry point."""

import pytest
import uvicorn

from guides_api import __main__ as entry_point

pytestmark = pytest.mark.usefixtures("isolated_env")


def test_main_runs_uvicorn_with_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    monkeypatch.setenv("GUIDES_API_HOST", "0.0.0.0")
    monkeypatch.setenv("GUIDES_API_PORT", "9001")
    monkeypatch.setenv("GUIDES_API_LOG_LEVEL", "WARNING")

    entry_point.main()

    assert calls == [
        (
            ("guides_api.app:app",),
            {"host": "0.0.0.0", "port": 9001, "log_level": "warning"},
        )
    ]
