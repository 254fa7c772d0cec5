"""
Tests for the command-line entry point.
"""

import json

import pytest

from jobinfo import ask

from conftest import make_settings


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(ask, "configure_logging", lambda *args, **kwargs: None)


class TestAsk:
    def test_explain_skips_model(self, monkeypatch, capsys):
        monkeypatch.setattr(ask, "get_settings", lambda: make_settings())
        ask.main(["What is the salary for Deputy Sheriff in Ventura?", "--explain"])
        details = json.loads(capsys.readouterr().out)
        assert details["fragment"] == "deputy sheriff"
        assert details["stage"] == "exact"
        assert details["context"]["salary"] == {"grade1": "$41.27", "grade2": "$57.82"}

    def test_profile_override(self, monkeypatch, capsys):
        monkeypatch.setattr(ask, "get_settings", lambda: make_settings())
        ask.main(["sheriff patrol deputy officer", "--explain", "--profile", "lenient"])
        details = json.loads(capsys.readouterr().out)
        assert details["profile"] == "lenient"
        assert details["context"]["title"] == "Deputy Sheriff"

    def test_missing_credentials_exit(self, monkeypatch, capsys):
        monkeypatch.setattr(ask, "get_settings", lambda: make_settings())
        with pytest.raises(SystemExit) as exc:
            ask.main(["What is the salary for Deputy Sheriff?"])
        assert exc.value.code == 1
        assert "GEMINI_API_KEY" in capsys.readouterr().err
