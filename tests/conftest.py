"""Shared fixtures: clean GA4 environment and a fake navigation framework."""

import types
from collections.abc import Iterator

import pytest

from ga4.config import ENV_VAR
from ga4.helpers import reset_default_renderer


@pytest.fixture(autouse=True)
def _clean_ga4_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Each test starts with no measurement ID and a fresh default renderer."""
    monkeypatch.delenv(ENV_VAR, raising=False)
    reset_default_renderer()
    yield
    reset_default_renderer()


@pytest.fixture
def fake_livewire(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    """Register a fake ``livewire`` module exposing ``Livewire`` on sys.modules."""
    mod = types.ModuleType("livewire")
    mod.Livewire = type("Livewire", (), {})  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "livewire", mod)
    return mod
