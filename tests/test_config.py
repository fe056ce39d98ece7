from __future__ import annotations

import logging

import pytest

from gemini_proxy.common.config import DEFAULT_MODEL_ID, ProxyConfig
from gemini_proxy.common.logging_setup import resolve_level, setup_logging

ENV_VARS = ("GEMINI_API_KEY", "GEMINI_MODEL_ID", "LOG_LEVEL", "PROXY_HOST", "PROXY_PORT")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_reads_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", " abc ")
    monkeypatch.setenv("GEMINI_MODEL_ID", "gemini-test")
    monkeypatch.setenv("PROXY_PORT", "9001")
    cfg = ProxyConfig.from_env()
    assert cfg.api_key == "abc"
    assert cfg.model == "gemini-test"
    assert cfg.port == 9001
    assert cfg.has_api_key is True


def test_from_env_defaults() -> None:
    cfg = ProxyConfig.from_env()
    assert cfg.model == DEFAULT_MODEL_ID
    assert cfg.log_level == "INFO"
    assert (cfg.host, cfg.port) == ("127.0.0.1", 8000)


@pytest.mark.parametrize("value", [None, "", "   "])
def test_blank_key_is_stored_as_none(monkeypatch: pytest.MonkeyPatch, value: str | None) -> None:
    if value is not None:
        monkeypatch.setenv("GEMINI_API_KEY", value)
    cfg = ProxyConfig.from_env()
    assert cfg.api_key is None
    assert cfg.has_api_key is False


def test_config_is_immutable() -> None:
    cfg = ProxyConfig(api_key="k")
    with pytest.raises(AttributeError):
        cfg.api_key = "other"  # type: ignore[misc]


@pytest.mark.parametrize(("level", "expected"), [("debug", logging.DEBUG), (logging.WARNING, logging.WARNING), ("bogus", logging.INFO)])
def test_setup_logging_levels(level: int | str, expected: int) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging(level)
        assert root.level == expected
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


@pytest.mark.parametrize(("level", "expected"), [(" Warning ", logging.WARNING), (logging.DEBUG, logging.DEBUG), ("bogus", logging.INFO)])
def test_resolve_level(level: int | str, expected: int) -> None:
    assert resolve_level(level) == expected
