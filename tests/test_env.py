import pytest

from tekerectc.env import read_env


def test_read_env_returns_value(monkeypatch):
    monkeypatch.setenv("TEKERECTC_SAMPLE_VALUE", "hello world")
    assert read_env("TEKERECTC_SAMPLE_VALUE") == "hello world"


def test_read_env_sees_updates(monkeypatch):
    monkeypatch.setenv("TEKERECTC_SAMPLE_VALUE", "first")
    assert read_env("TEKERECTC_SAMPLE_VALUE") == "first"
    monkeypatch.setenv("TEKERECTC_SAMPLE_VALUE", "second")
    assert read_env("TEKERECTC_SAMPLE_VALUE") == "second"


def test_read_env_missing_key_raises(monkeypatch):
    monkeypatch.delenv("TEKERECTC_DEFINITELY_UNSET", raising=False)
    with pytest.raises(KeyError):
        read_env("TEKERECTC_DEFINITELY_UNSET")