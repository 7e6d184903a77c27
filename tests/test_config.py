"""Tests for configuration helpers."""

import pytest

from metar_winds.config import get_max_workers, _default_max_workers


class TestGetMaxWorkers:
    """Test worker count resolution."""

    def test_explicit_value(self):
        assert get_max_workers(3) == 3

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("METAR_WINDS_MAX_WORKERS", "5")
        assert get_max_workers() == 5

    def test_explicit_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("METAR_WINDS_MAX_WORKERS", "5")
        assert get_max_workers(2) == 2

    def test_default(self, monkeypatch):
        monkeypatch.delenv("METAR_WINDS_MAX_WORKERS", raising=False)
        assert get_max_workers() == _default_max_workers()

    @pytest.mark.parametrize("value", ["abc", "0", "-2"])
    def test_invalid_falls_back(self, monkeypatch, value):
        monkeypatch.setenv("METAR_WINDS_MAX_WORKERS", value)
        assert get_max_workers() == _default_max_workers()
