from pathlib import Path

import pytest

from pso_mapper.config import DEFAULT_BATTLE_PARAMS_PREFIX, MapperConfig


def test_defaults():
    config = MapperConfig.from_env({})
    assert config.battle_params_prefix == DEFAULT_BATTLE_PARAMS_PREFIX
    assert config.solo is False
    assert config.alt_enemies is False
    assert config.log_level == "WARNING"


def test_env_overrides():
    config = MapperConfig.from_env({
        "PSO_MAPPER_BATTLE_PARAMS_PREFIX": "/srv/pso/BattleParamEntry",
        "PSO_MAPPER_SOLO": "yes",
        "PSO_MAPPER_ALT_ENEMIES": "1",
        "PSO_MAPPER_LOG_LEVEL": "debug",
    })
    assert config.battle_params_prefix == Path("/srv/pso/BattleParamEntry")
    assert config.solo is True
    assert config.alt_enemies is True
    assert config.log_level == "DEBUG"


def test_bad_boolean_rejected():
    with pytest.raises(ValueError, match="PSO_MAPPER_SOLO"):
        MapperConfig.from_env({"PSO_MAPPER_SOLO": "maybe"})


@pytest.mark.parametrize("raw", ["verbose", "10", "INFO2"])
def test_bad_log_level_rejected(raw):
    with pytest.raises(ValueError, match="PSO_MAPPER_LOG_LEVEL"):
        MapperConfig.from_env({"PSO_MAPPER_LOG_LEVEL": raw})


def test_log_level_is_trimmed_and_upper_cased():
    config = MapperConfig.from_env({"PSO_MAPPER_LOG_LEVEL": " warning "})
    assert config.log_level == "WARNING"
