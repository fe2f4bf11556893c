"""Tests for configuration loading."""

from pathlib import Path

from signpad.core.config import SignpadConfig, load_config


def test_defaults(monkeypatch):
    for name in ('SIGNPAD_DATA_DIR', 'SIGNPAD_VIEWPORT_MARGIN', 'SIGNPAD_EXPORT_SCALE'):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.viewport_margin == 20.0
    assert (config.page_width, config.page_height) == (794, 1123)
    assert config.stroke_width == 2.0
    assert config.export_scale == 2
    assert config.store_path == Path.home() / ".signpad" / "submissions.json"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv('SIGNPAD_DATA_DIR', str(tmp_path))
    monkeypatch.setenv('SIGNPAD_VIEWPORT_MARGIN', "32")
    monkeypatch.setenv('SIGNPAD_EXPORT_SCALE', "3")

    config = load_config()

    assert config.store_path == tmp_path / "submissions.json"
    assert config.viewport_margin == 32.0
    assert config.export_scale == 3


def test_invalid_numbers_are_ignored(monkeypatch):
    monkeypatch.setenv('SIGNPAD_VIEWPORT_MARGIN', "wide")
    monkeypatch.setenv('SIGNPAD_EXPORT_SCALE', "2.5")

    config = load_config()

    assert config.viewport_margin == SignpadConfig().viewport_margin
    assert config.export_scale == SignpadConfig().export_scale
