"""
Shared pytest fixtures for layout tests.
"""
import logging
from logging.handlers import RotatingFileHandler

import networkx as nx
import pytest

from keygraph.layouts.presets import (
    build_layout, QWERTY_US_PRESET, DVORAK_PRESET,
    STANDARD_NUMPAD_PRESET, MAC_NUMPAD_PRESET
)


@pytest.fixture
def graph():
    """An empty keyboard graph."""
    return nx.DiGraph()


@pytest.fixture
def qwerty():
    return build_layout(QWERTY_US_PRESET)


@pytest.fixture
def dvorak():
    return build_layout(DVORAK_PRESET)


@pytest.fixture
def standard_numpad():
    return build_layout(STANDARD_NUMPAD_PRESET)


@pytest.fixture
def mac_numpad():
    return build_layout(MAC_NUMPAD_PRESET)


@pytest.fixture(params=["qwerty", "dvorak", "standard_numpad", "mac_numpad"])
def any_layout(request):
    """Each built-in layout, freshly compiled."""
    return request.getfixturevalue(request.param)


@pytest.fixture
def restore_root_logger():
    """Remove the handlers installed by LoggingManager.setup_logging afterwards."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler, RotatingFileHandler) or type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
