" generic fixtures "
import logging
import sys
from pathlib import Path

import pytest
from pytest_asyncio import fixture

SAMPLE_EXTENSION = Path(__file__).parent.parent / "sample_extension"


def pytest_configure():
    "Runs once before all"
    from compfilter.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)
    if str(SAMPLE_EXTENSION) not in sys.path:
        sys.path.append(str(SAMPLE_EXTENSION))


@pytest.fixture
def test_logger():
    "A logger for objects requiring one"
    from compfilter.logging_setup import get_logger

    return get_logger("tests", level=logging.DEBUG)


@pytest.fixture
def registry():
    "An empty definition registry"
    from compfilter.registry import DefinitionRegistry

    return DefinitionRegistry()


@pytest.fixture
def definitions_dir(tmp_path):
    "A definitions directory holding a copy of the sample definition"
    directory = tmp_path / "completions.d"
    directory.mkdir()
    sample = SAMPLE_EXTENSION / "compfilter_examples" / "mytool.py"
    (directory / "mytool.py").write_text(sample.read_text())
    return directory


@fixture
async def no_default_config(monkeypatch, tmp_path):
    "Points the default locations to an empty directory"
    monkeypatch.delenv("COMPFILTER_CONFIG", raising=False)
    monkeypatch.setattr("compfilter.config_loader.CONFIG_FILE", tmp_path / "missing" / "config.toml")
    monkeypatch.setattr("compfilter.registry.DEFINITIONS_DIR", tmp_path / "missing" / "completions.d")
    yield
