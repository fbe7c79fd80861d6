import json

import pytest

from chip8vm.config import EmulatorConfig


def test_defaults():
    config = EmulatorConfig()
    assert config.instruction_rate == 500
    assert config.stack_limit == 16
    assert config.seed is None


def test_from_json(tmp_path):
    path = tmp_path / "chip8.json"
    path.write_text(json.dumps({"instruction_rate": 1200, "stack_limit": None, "seed": 7}))
    config = EmulatorConfig.from_json(path)
    assert config.instruction_rate == 1200
    assert config.stack_limit is None
    assert config.seed == 7
    assert config.scale == 12


def test_unknown_keys_are_rejected(tmp_path):
    path = tmp_path / "chip8.json"
    path.write_text(json.dumps({"speed": 10}))
    with pytest.raises(ValueError, match="speed"):
        EmulatorConfig.from_json(path)


def test_malformed_json(tmp_path):
    path = tmp_path / "chip8.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        EmulatorConfig.from_json(path)


@pytest.mark.parametrize("kwargs", [
    {"instruction_rate": 0},
    {"instruction_rate": 70000},
    {"stack_limit": 0},
    {"scale": 0},
])
def test_validation(kwargs):
    with pytest.raises(ValueError):
        EmulatorConfig(**kwargs)


def test_override_skips_none():
    config = EmulatorConfig(instruction_rate=900).override(instruction_rate=None, seed=3)
    assert config.instruction_rate == 900
    assert config.seed == 3
