"""Test world table loading, schema checks and referential validation."""

import json
import logging

import pytest

from routebook.bootstrap import load_registry, load_build_data
from routebook.core.loader.world_loader import (
    WorldDataError,
    build_world_from_dict,
    build_build_data_from_dict,
    validate_world,
)

def _area(area_id, act=1, **extra):
    data = {"id": area_id, "act": act, "name": area_id.title()}
    data.update(extra)
    return data

def test_packaged_world_loads_cleanly(caplog):
    caplog.set_level(logging.WARNING, logger="routebook")
    registry = load_registry(use_cache=False)
    assert registry.get_area("1_1_town").is_town_area
    assert registry.town_index[2] == "1_2_town"
    assert registry.waypoint_unlocks("Merveil, the Twisted") == ("1_2_town",)
    assert registry.get_quest("a1q1").reward_offers[0].quest_npc == "Tarkleigh"
    assert "[WORLD WARNING]" not in caplog.text

def test_registry_is_cached_per_directory():
    assert load_registry() is load_registry()

def test_defaults_for_optional_fields():
    world = build_world_from_dict({"a": _area("a")})
    area = world.areas["a"]
    assert area.connection_ids == ()
    assert area.is_town_area is False
    assert area.has_waypoint is False
    assert area.crafting_recipes == ()
    assert world.kill_waypoints == {}
    assert world.quests == {}

def test_schema_violation_raises():
    with pytest.raises(WorldDataError, match="areas"):
        build_world_from_dict({"a": {"id": "a", "act": "one", "name": "A"}})

def test_unknown_area_field_rejected():
    with pytest.raises(WorldDataError):
        build_world_from_dict({"a": _area("a", bosses=["Hillock"])})

def test_key_must_match_id():
    with pytest.raises(WorldDataError, match="does not match"):
        build_world_from_dict({"a": _area("b")})

def test_validate_world_reports_issues():
    world = build_world_from_dict(
        {
            "t1": _area("t1", is_town_area=True, has_waypoint=True, connection_ids=["x"]),
            "t1b": _area("t1b", is_town_area=True),
            "a2": _area("a2", act=2),
        },
        {"Boss": ["zz", "a2"]},
        {"q": {"id": "q", "name": "Q", "act": 5}},
    )
    issues = validate_world(world)
    assert "Area 't1' connects to missing area 'x'" in issues
    assert "Act 1 has 2 town areas" in issues
    assert "Act 2 has no town area" in issues
    assert "Kill 'Boss' unlocks missing area 'zz'" in issues
    assert "Kill 'Boss' unlocks 'a2' which has no waypoint" in issues
    assert "Quest 'q' belongs to unknown act 5" in issues

def test_load_registry_from_directory(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="routebook")
    (tmp_path / "areas.json").write_text(json.dumps({
        "t": _area("t", is_town_area=True, connection_ids=["gone"]),
    }), encoding="utf-8")
    registry = load_registry(tmp_path)
    assert list(registry.area_index) == ["t"]
    assert registry.quest_index == {}
    assert "[WORLD WARNING] Area 't' connects to missing area 'gone'" in caplog.text

def test_world_dir_from_env(tmp_path, monkeypatch):
    (tmp_path / "areas.json").write_text(json.dumps({"only": _area("only")}), encoding="utf-8")
    monkeypatch.setenv("RB_WORLD_DIR", str(tmp_path))
    assert list(load_registry().area_index) == ["only"]

def test_missing_areas_file(tmp_path):
    with pytest.raises(WorldDataError, match="not found"):
        load_registry(tmp_path)

def test_invalid_json(tmp_path):
    (tmp_path / "areas.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(WorldDataError, match="Invalid JSON"):
        load_registry(tmp_path)

def test_build_data_from_dict():
    build = build_build_data_from_dict({
        "characterClass": "Witch",
        "requiredGems": [{"id": "Fireball", "note": "main skill"}, {"id": "Arc"}],
    })
    assert build.character_class == "Witch"
    assert [g.id for g in build.required_gems] == ["Fireball", "Arc"]
    assert build.required_gems[1].note == ""

def test_build_data_file(tmp_path):
    path = tmp_path / "build.json"
    path.write_text(json.dumps({"characterClass": "Templar"}), encoding="utf-8")
    assert load_build_data(path).required_gems == ()

def test_build_data_requires_class():
    with pytest.raises(WorldDataError, match="build data"):
        build_build_data_from_dict({"requiredGems": []})
