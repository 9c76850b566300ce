"""Test environment-driven configuration."""

import logging

from routebook import config

def test_defaults(monkeypatch):
    for name in ("RB_START_AREA", "RB_START_TOWN", "RB_LABYRINTH_AREA", "RB_WORLD_DIR", "RB_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert config.get_start_area_id() == "1_1_1"
    assert config.get_start_town_id() == "1_1_town"
    assert config.get_labyrinth_area_id() == "Labyrinth_Airlock"
    assert config.get_world_dir() == config.PACKAGED_WORLD_DIR
    assert (config.PACKAGED_WORLD_DIR / "areas.json").exists()
    assert config.get_log_level() == logging.WARNING

def test_blank_values_fall_back(monkeypatch):
    monkeypatch.setenv("RB_START_AREA", "   ")
    monkeypatch.setenv("RB_WORLD_DIR", "")
    assert config.get_start_area_id() == "1_1_1"
    assert config.get_world_dir() == config.PACKAGED_WORLD_DIR

def test_log_level_by_name_or_number(monkeypatch):
    monkeypatch.setenv("RB_LOG_LEVEL", "info")
    assert config.get_log_level() == logging.INFO
    monkeypatch.setenv("RB_LOG_LEVEL", "10")
    assert config.get_log_level() == 10
    monkeypatch.setenv("RB_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.WARNING

def test_strict_default_read_at_call_time(monkeypatch):
    monkeypatch.delenv("RB_STRICT", raising=False)
    assert config.get_strict_default() is False
    monkeypatch.setenv("RB_STRICT", "yes")
    assert config.get_strict_default() is True
    monkeypatch.setenv("RB_STRICT", "0")
    assert config.get_strict_default() is False
