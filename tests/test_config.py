# test_config.py
import json
import pathlib
import sys
from pathlib import Path

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from config import StorageBackend, get_settings  # noqa: E402

CONFIG_JSON = Path(__file__).resolve().parents[1] / "config.json"


def _settings():
    get_settings.cache_clear()
    return get_settings()


def test_defaults_from_config():
    settings = _settings()
    data = json.loads(CONFIG_JSON.read_text())
    assert settings.currency_symbol == data["currency_symbol"]
    assert settings.default_gst_percent == data["default_gst_percent"]
    assert settings.initial_quote_status == "draft"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CURRENCY_SYMBOL", "$")
    monkeypatch.setenv("STORAGE_BACKEND", "sqlalchemy")
    settings = _settings()
    assert settings.currency_symbol == "$"
    assert settings.storage_backend == StorageBackend.SQLALCHEMY
    monkeypatch.delenv("CURRENCY_SYMBOL")
    monkeypatch.delenv("STORAGE_BACKEND")
    _settings()


def test_missing_key_uses_default(monkeypatch):
    original = CONFIG_JSON.read_text()
    monkeypatch.setattr(
        Path,
        "read_text",
        lambda self, *args, **kwargs: json.dumps(
            {
                k: v
                for k, v in json.loads(original).items()
                if k != "default_approver"
            }
        ),
    )
    settings = _settings()
    assert settings.default_approver == "Admin"
    monkeypatch.undo()
    _settings()
