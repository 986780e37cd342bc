"""
Testing settings
- Bad values fall back to defaults, env vars sit under explicit values.
"""

import logging

from mind.config import DEFAULT_CHANCES, Settings, load_settings

def test_defaults():
    settings = load_settings()
    assert settings.chances == 10
    assert settings.color_mode == "auto"
    assert settings.seed is None
    assert settings.full_range is False

def test_chances_from_text():
    assert load_settings(chances="3").chances == 3

def test_bad_chances_fall_back():
    assert load_settings(chances="many").chances == DEFAULT_CHANCES
    assert load_settings(chances="0").chances == DEFAULT_CHANCES
    assert load_settings(chances="-4").chances == DEFAULT_CHANCES
    assert Settings(chances=None).chances == DEFAULT_CHANCES

def test_color_uses_first_letter():
    assert load_settings(color="Dark").color_mode == "dark"
    assert load_settings(color="l").color_mode == "light"
    assert load_settings(color="GREY").color_mode == "grey"
    assert load_settings(color="monochrome").color_mode == "mono"

def test_unknown_color_kept_for_theme_fallback():
    assert load_settings(color="xyz").color_mode == "xyz"

def test_env_values(monkeypatch):
    monkeypatch.setenv("MIND_CHANCES", "6")
    monkeypatch.setenv("MIND_COLOR", "dark")
    monkeypatch.setenv("MIND_SEED", "17")

    settings = load_settings()

    assert settings.chances == 6
    assert settings.color_mode == "dark"
    assert settings.seed == 17

def test_explicit_values_beat_env(monkeypatch):
    monkeypatch.setenv("MIND_CHANCES", "6")
    monkeypatch.setenv("MIND_COLOR", "dark")

    settings = load_settings(chances="2", color="mono", seed="5", full_range=True)

    assert settings.chances == 2
    assert settings.color_mode == "mono"
    assert settings.seed == 5
    assert settings.full_range is True

def test_bad_seed_is_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        settings = load_settings(seed="tomorrow")

    assert settings.seed is None
    assert "ignoring non-numeric seed" in caplog.text
