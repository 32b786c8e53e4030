import pytest

from ecommerce_api.config import DEFAULT_PORT, ServerSettings, load_settings


def test_defaults_when_environment_is_empty():
    settings = load_settings({})
    assert settings == ServerSettings(host="0.0.0.0", port=5000, log_level="info")


@pytest.mark.parametrize("raw", ["", "   ", "abc", "50.5", "port"])
def test_unusable_port_falls_back_to_default(raw):
    assert load_settings({"PORT": raw}).port == DEFAULT_PORT


def test_port_from_environment():
    assert load_settings({"PORT": "8080"}).port == 8080


def test_port_is_not_range_checked():
    # Left for the bind to reject.
    assert load_settings({"PORT": "70000"}).port == 70000


def test_host_and_log_level_overrides():
    settings = load_settings({"HOST": "127.0.0.1", "LOG_LEVEL": " DEBUG "})
    assert settings.host == "127.0.0.1"
    assert settings.log_level == "debug"


def test_reads_process_environment_at_call_time(monkeypatch):
    monkeypatch.setenv("PORT", "6001")
    assert load_settings().port == 6001

    monkeypatch.delenv("PORT")
    assert load_settings().port == DEFAULT_PORT
