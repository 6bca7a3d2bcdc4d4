import json
import logging
from datetime import date

import pytest

import config
from computations import initialize, record_cycle


def test_missing_settings_file_gives_defaults(tmp_path):
    assert config.load_settings(str(tmp_path / "nope.json")) == config.DEFAULT_SETTINGS


def test_settings_override_known_keys_only(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"log_level": "DEBUG", "bogus": 1}), encoding="utf-8")
    settings = config.load_settings(str(path))
    assert settings["log_level"] == "DEBUG"
    assert settings["window_geometry"] == config.DEFAULT_SETTINGS["window_geometry"]
    assert "bogus" not in settings


def test_invalid_settings_json_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        config.load_settings(str(path))


def test_get_settings_reads_app_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("DEBT_TRACKER_HOME", str(tmp_path))
    (tmp_path / "settings.json").write_text(json.dumps({"export_dir": "/tmp/x"}), encoding="utf-8")
    assert config.get_settings()["export_dir"] == "/tmp/x"


def test_setup_logging_levels(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    config.setup_logging("debug")
    config.setup_logging("no-such-level")
    config.setup_logging(None)
    assert [c["level"] for c in calls] == [logging.DEBUG, logging.WARNING, logging.WARNING]


def test_state_to_dict():
    state = initialize(1000, date(2024, 1, 1))
    state, _ = record_cycle(state, 500, [("rent", 200)], 100)
    d = config.state_to_dict(state)
    assert d["debt"] == 900
    assert d["initial_debt"] == 1000
    assert d["next_period_start"] == "2024-01-16"
    assert d["cycles"] == [
        {
            "date_range": "1-15 Jan",
            "received_money": 500,
            "expenses": [{"description": "rent", "amount": 200}],
            "free_money": 300,
            "debt_payment": 100,
            "remaining_free_money": 200,
            "debt_after": 900,
        }
    ]
