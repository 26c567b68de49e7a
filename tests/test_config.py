import importlib

import evtrack.config


def test_defaults():
    assert isinstance(evtrack.config.Config.WINDOW_SECONDS, int)
    assert isinstance(evtrack.config.Config.TICK_INTERVAL_MS, int)


def test_env_override(monkeypatch):
    monkeypatch.setenv("EVTRACK_WINDOW_SECONDS", "60")
    monkeypatch.setenv("EVTRACK_TICK_INTERVAL_MS", "250")
    try:
        config = importlib.reload(evtrack.config)
        assert config.Config.WINDOW_SECONDS == 60
        assert config.Config.TICK_INTERVAL_MS == 250
    finally:
        monkeypatch.undo()
        importlib.reload(evtrack.config)
