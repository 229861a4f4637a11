# conftest.py

import logging
import pytest
from pathlib import Path
import tempfile

from lslens.core.records import FileRecord, Indicator


@pytest.fixture
def temp_dir():
    """Provide temporary directory"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_home(temp_dir, monkeypatch):
    """Point HOME at a temporary directory so saved config stays local"""
    monkeypatch.setenv("HOME", str(temp_dir))
    monkeypatch.setenv("USERPROFILE", str(temp_dir))
    return temp_dir


@pytest.fixture
def make_record():
    """Factory for FileRecords with sensible defaults"""
    def _make(name, ext="", size=0, mod_time=0.0, indicator=Indicator.REGULAR, **kwargs):
        return FileRecord(
            name=name,
            ext=ext,
            size=size,
            mod_time=mod_time,
            indicator=indicator,
            **kwargs
        )
    return _make


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after a test reconfigures it"""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)
