import pytest

from cloudjobs.config import DEFAULT_TOKEN_TTL, Config, configure, get_config
from cloudjobs.errors import ConfigurationError


def test_processor_url_joins_host_and_path():
    config = Config(processor_host="https://jobs.example.com/", processor_path="/cloudjobs/run")
    assert config.processor_url == "https://jobs.example.com/cloudjobs/run"


def test_processor_url_requires_host():
    with pytest.raises(ConfigurationError):
        Config().processor_url


def test_queue_location_requires_project_and_location():
    with pytest.raises(ConfigurationError):
        Config(gcp_project_id="p").queue_location()
    assert Config(gcp_project_id="p", gcp_location_id="l").queue_location() == ("p", "l", "default")


def test_from_env(monkeypatch):
    monkeypatch.setenv("CLOUDJOBS_PROCESSOR_PATH", "/tasks/run")
    monkeypatch.setenv("CLOUDJOBS_GCP_QUEUE_ID", "critical")
    monkeypatch.setenv("CLOUDJOBS_TOKEN_TTL", "120")
    config = Config.from_env()
    assert config.processor_path == "/tasks/run"
    assert config.gcp_queue_id == "critical"
    assert config.token_ttl == 120


@pytest.mark.parametrize("value, expected", [("0", None), ("", None), ("30", 30)])
def test_token_ttl_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("CLOUDJOBS_TOKEN_TTL", value)
    assert Config.from_env().token_ttl == expected


def test_token_ttl_default(monkeypatch):
    monkeypatch.delenv("CLOUDJOBS_TOKEN_TTL", raising=False)
    assert Config.from_env().token_ttl == DEFAULT_TOKEN_TTL


def test_configure_overrides_active_config():
    configure(gcp_queue_id="overridden")
    assert get_config().gcp_queue_id == "overridden"
