"""Shared test fixtures for aj tests."""

from pathlib import Path

import pytest

from aj.store import WeightStore

SAMPLE_DATA = """\
10.000,/Users/xiaotan/Toy/pdfminer/pdfminer
14.142,/Users/xiaotan/.vim/plugged/YouCompleteMe/python/ycm
14.142,/Users/xiaotan/Toy/tx/build/lib
10.000,/Users/xiaotan/.local/venvs
22.361,/Users/xiaotan/Work/slate
14.142,/Users/xiaotan/Toy/tx/elasticsearch-py
10.000,/Users/ycm/test
"""


@pytest.fixture(autouse=True)
def temp_home(tmp_path, monkeypatch):
    """Point HOME and XDG_CONFIG_HOME at temporary directories.

    Clears AJ_DATA_FILE and AJ_VERBOSITY so the user's environment never
    leaks into a test. Returns the home path.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("AJ_DATA_FILE", raising=False)
    monkeypatch.delenv("AJ_VERBOSITY", raising=False)
    return home


@pytest.fixture
def data_file(temp_home):
    """Default store file ($HOME/.autojump-go.txt) filled with sample records."""
    path = temp_home / ".autojump-go.txt"
    path.write_text(SAMPLE_DATA)
    return path


@pytest.fixture
def sample_store(data_file):
    store = WeightStore()
    assert store.load(data_file) is None
    return store


def write_config(tmp_path: Path, text: str) -> Path:
    """Write $XDG_CONFIG_HOME/aj/config.yaml for the temp_home fixture."""
    config_dir = tmp_path / "config" / "aj"
    config_dir.mkdir(parents=True, exist_ok=True)
    config_file = config_dir / "config.yaml"
    config_file.write_text(text)
    return config_file


def make_store(path: Path, records: dict) -> WeightStore:
    """Write records to path and return a store loaded from it."""
    path.write_text("".join(f"{w:.3f},{p}\n" for p, w in records.items()))
    store = WeightStore()
    assert store.load(path) is None
    return store


def read_records(path: Path) -> dict:
    """Parse a store file into {path: weight} for order-independent checks."""
    records = {}
    for line in path.read_text().splitlines():
        weight, _, entry = line.partition(",")
        records[entry] = float(weight)
    return records
