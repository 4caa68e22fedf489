import logging

import pytest
from PySide6.QtCore import QCoreApplication

from Calculator.CalcEngine import Engine, EngineSettings


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """A QCoreApplication for signal tests; no windowing system needed."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def engine():
    return Engine()


@pytest.fixture
def dot_engine():
    """Engine using '.' as the decimal separator."""
    return Engine(settings=EngineSettings(decimal_separator="."))


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Point config_manager at a throwaway config.json."""
    from Calculator import config_manager

    path = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "config_json", path)
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """setup_logging() binds to the current stdout; drop its handlers after each test."""
    yield
    logger = logging.getLogger("Calculator")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
