import pytest

from FD2NF.utils.engine_config import EngineConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("FD2NF_MAX_ATTRIBUTES", raising=False)
    monkeypatch.delenv("FD2NF_WARN_ATTRIBUTES", raising=False)


def test_defaults_from_yaml():
    config = EngineConfig.from_env()
    assert config.max_attributes == 8
    assert config.warn_attributes == 6


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FD2NF_MAX_ATTRIBUTES", "10")
    monkeypatch.setenv("FD2NF_WARN_ATTRIBUTES", "7")
    config = EngineConfig.from_env()
    assert (config.max_attributes, config.warn_attributes) == (10, 7)


def test_values_are_clamped(monkeypatch):
    monkeypatch.setenv("FD2NF_MAX_ATTRIBUTES", "99")
    monkeypatch.setenv("FD2NF_WARN_ATTRIBUTES", "50")
    config = EngineConfig.from_env()
    assert config.max_attributes == 16
    assert config.warn_attributes == 16


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("FD2NF_MAX_ATTRIBUTES", "many")
    monkeypatch.setenv("FD2NF_WARN_ATTRIBUTES", " ")
    assert EngineConfig.from_env() == EngineConfig()
