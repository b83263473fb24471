"""Shared fixtures: every test gets its own core with empty stores."""

import pytest

from shellbox.core import init_core


@pytest.fixture
def core(tmp_path):
    # no config file -> defaults
    return init_core(config_path=tmp_path / "missing.json")


@pytest.fixture
def run(core):
    return core.execute
