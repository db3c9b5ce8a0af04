"""Tests for configuration and data file resolution."""

import pytest

from aj import config
from aj.config import ConfigError

from conftest import write_config


def test_default_data_path(temp_home):
    assert config.get_data_path() == temp_home / ".autojump-go.txt"


def test_env_overrides_config(tmp_path, monkeypatch):
    write_config(tmp_path, "data_file: /from/config.txt\n")
    monkeypatch.setenv("AJ_DATA_FILE", "/from/env.txt")
    assert str(config.get_data_path()) == "/from/env.txt"


def test_config_overrides_home(tmp_path):
    write_config(tmp_path, "data_file: /from/config.txt\n")
    assert str(config.get_data_path()) == "/from/config.txt"


def test_missing_home_raises(monkeypatch):
    monkeypatch.delenv("HOME")
    with pytest.raises(ConfigError, match="HOME"):
        config.get_data_path()


def test_invalid_yaml_is_ignored(tmp_path):
    write_config(tmp_path, "data_file: [unclosed\n")
    assert config.load_config() == {}


def test_non_mapping_yaml_is_ignored(tmp_path):
    write_config(tmp_path, "- just\n- a list\n")
    assert config.load_config() == {}


def test_defaults():
    assert config.get_verbosity() == 1
    assert config.get_max_candidates() == 10
    assert config.is_case_sensitive() is False
    assert config.use_atomic_write() is True


def test_values_from_config(tmp_path):
    write_config(
        tmp_path,
        "verbosity: 3\nmax_candidates: 4\ncase_sensitive: true\natomic_write: false\n",
    )
    assert config.get_verbosity() == 3
    assert config.get_max_candidates() == 4
    assert config.is_case_sensitive() is True
    assert config.use_atomic_write() is False


def test_bad_max_candidates_falls_back(tmp_path):
    write_config(tmp_path, "max_candidates: 0\n")
    assert config.get_max_candidates() == 10
    write_config(tmp_path, "max_candidates: lots\n")
    assert config.get_max_candidates() == 10


def test_verbosity_env_override(tmp_path, monkeypatch):
    write_config(tmp_path, "verbosity: 3\n")
    monkeypatch.setenv("AJ_VERBOSITY", "0")
    assert config.get_verbosity() == 0


def test_set_verbosity_round_trip():
    config.set_verbosity(2)
    assert config.get_verbosity() == 2
    assert config.load_config() == {"verbosity": 2}


def test_set_verbosity_rejects_out_of_range():
    with pytest.raises(ValueError):
        config.set_verbosity(4)
