import pytest

import run
from quiz_platform.app.core.config import Settings
from quiz_platform.app.core.logging_config import resolve_log_level


@pytest.mark.parametrize(
    "configured, expected",
    [("debug", "DEBUG"), (" Info ", "INFO"), ("warn", "WARNING"), ("verbose", "INFO"), ("", "INFO"), (None, "INFO")],
)
def test_resolve_log_level(configured, expected):
    assert resolve_log_level(configured) == expected


def test_run_passes_resolved_level_to_uvicorn(monkeypatch):
    monkeypatch.setattr(run, "settings", Settings(store_backend="memory", log_level="verbose"))
    servers = run.build_servers("all")
    assert len(servers) == 2
    assert {server.config.log_level for server in servers} == {"info"}


def test_run_builds_single_service(monkeypatch):
    monkeypatch.setattr(run, "settings", Settings(store_backend="memory", log_level="DEBUG"))
    servers = run.build_servers("question")
    assert len(servers) == 1
    assert servers[0].config.log_level == "debug"
