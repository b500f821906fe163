"""Shared fixtures for the codec tests."""

import pytest


@pytest.fixture(autouse=True)
def codec_env(monkeypatch, tmp_path):
    """Point the event log at a temporary file and reset all codec flags."""
    for name in ("B64_STRICT_DECODE", "B64_CODEC_DEBUG", "PRINT_CODEC_LOGS"):
        monkeypatch.delenv(name, raising=False)
    log_file = tmp_path / "logs" / "codec.log"
    monkeypatch.setenv("B64_LOG_FILE", str(log_file))
    return log_file
