import json

import pytest

import scripts.dump_battle_params as dump_battle_params
import scripts.dump_map as dump_map
from pso_mapper.models.enemy import Enemy
from tests.helpers.map_builders import exp_for, pack_entry, write_battle_params_files


def _setup(tmp_path):
    prefix = tmp_path / "BattleParamEntry"
    write_battle_params_files(prefix)
    map_file = tmp_path / "map_forest01.dat"
    map_file.write_bytes(pack_entry(0x44, skin=1) + pack_entry(0xA1) + pack_entry(0x9999))
    return prefix, map_file


def test_family_name():
    assert dump_map.family_name(0x44) == "Booma family"
    assert dump_map.family_name(0x9999) == "Unknown 0x9999"


def test_summarize_keeps_first_appearance_order():
    enemies = [Enemy(1, 0xA1), Enemy(2, 0x44), Enemy(3, 0xA1)]
    assert dump_map.summarize(enemies) == [("Chaos Sorcerer + 2 Bits", 2), ("Booma family", 1)]


def test_dump_map_json(tmp_path, capsys):
    prefix, map_file = _setup(tmp_path)
    rc = dump_map.main([str(map_file), "--battle-params", str(prefix), "--format", "json"])
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["total"] == 1 + 3 + 1
    assert out["difficulty"] == 0
    assert out["difficulty_name"] == "NORMAL"
    first = out["enemies"][0]
    assert first["family"] == "Booma family"
    assert first["experience"] == exp_for(0x4C)
    assert first["rt_index"] == 10
    assert out["enemies"][2]["is_clone"] is True
    assert out["enemies"][4]["experience"] == 0xFFFFFFFF


def test_dump_map_text_summary(tmp_path, capsys):
    prefix, map_file = _setup(tmp_path)
    rc = dump_map.main([str(map_file), "--battle-params", str(prefix), "--summary"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Chaos Sorcerer + 2 Bits" in out
    assert "Total: 5 enemies" in out


def test_dump_map_bad_length_reports_error(tmp_path, capsys):
    prefix, map_file = _setup(tmp_path)
    map_file.write_bytes(b"\x00" * 10)
    assert dump_map.main([str(map_file), "--battle-params", str(prefix)]) == 1


def test_dump_map_missing_battle_params(tmp_path):
    _, map_file = _setup(tmp_path)
    assert dump_map.main([str(map_file), "--battle-params", str(tmp_path / "nope")]) == 1


def test_dump_battle_params_json(tmp_path, capsys):
    prefix, _ = _setup(tmp_path)
    rc = dump_battle_params.main([
        "--battle-params", str(prefix), "--episode-index", "2", "--difficulty", "3",
        "--solo", "--format", "json",
    ])
    assert rc == 0
    rows = json.loads(capsys.readouterr().out)
    assert len(rows) == 0x61
    assert rows[0x10]["experience"] == exp_for(0x10)
    assert rows[0]["hp"] == 123


def test_format_row():
    from pso_mapper.models.battle_params import BattleParams

    row = BattleParams(1, 2, 3, 4, 5, 6, 7, 8, bytes(12), 99, 0)
    assert dump_battle_params.format_row(0x4B, row).startswith("4B: atp=1 psv=2")


def test_bad_log_level_fails_before_logging_setup(tmp_path, monkeypatch):
    _, map_file = _setup(tmp_path)
    monkeypatch.setenv("PSO_MAPPER_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="PSO_MAPPER_LOG_LEVEL"):
        dump_map.main([str(map_file)])


def test_dump_map_reports_difficulty_name(tmp_path, capsys):
    prefix, map_file = _setup(tmp_path)
    rc = dump_map.main([
        str(map_file), "--battle-params", str(prefix), "--difficulty", "3", "--format", "json",
    ])
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["difficulty"] == 3
    assert out["difficulty_name"] == "ULTIMATE"
