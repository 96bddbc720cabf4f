# layouts/presets.py
"""
Named layout presets and the wiring that compiles them into graphs.

All pre-registered keys are added as nodes before the connector runs, so
the skip and raise policies can tell declared keys from typos.
"""
import logging

import networkx as nx

from keygraph.layouts.connector import connect_keyboard_nodes
from keygraph.layouts.keymaps import (
    QWERTY_US_ROWS, DVORAK_ROWS, STANDARD_NUMPAD_ROWS, MAC_NUMPAD_ROWS,
    US_SHIFTED_KEYS
)
from keygraph.layouts.keys import add_alphabetics, add_unshifted_number_keys, add_remaining_keys
from keygraph.utils.config import LayoutPreset, MissingKeys

logger = logging.getLogger(__name__)

QWERTY_US_PRESET = LayoutPreset(
    name="qwerty",
    style="slanted",
    rows=QWERTY_US_ROWS,
    alphabetics=True,
    keys=US_SHIFTED_KEYS,
    missing_keys=MissingKeys.SKIP,
)

DVORAK_PRESET = LayoutPreset(
    name="dvorak",
    style="slanted",
    rows=DVORAK_ROWS,
    alphabetics=True,
    keys=US_SHIFTED_KEYS,
    missing_keys=MissingKeys.SKIP,
)

STANDARD_NUMPAD_PRESET = LayoutPreset(
    name="standard_numpad",
    style="aligned",
    rows=STANDARD_NUMPAD_ROWS,
    numbers=True,
    missing_keys=MissingKeys.CREATE,
)

MAC_NUMPAD_PRESET = LayoutPreset(
    name="mac_numpad",
    style="aligned",
    rows=MAC_NUMPAD_ROWS,
    missing_keys=MissingKeys.CREATE,
)

BUILTIN_PRESETS = (QWERTY_US_PRESET, DVORAK_PRESET, STANDARD_NUMPAD_PRESET, MAC_NUMPAD_PRESET)

def build_layout(preset: LayoutPreset) -> nx.DiGraph:
    """Compile a preset into a fresh, mutable adjacency graph."""
    graph = nx.DiGraph(name=preset.name, style=preset.style)

    if preset.alphabetics:
        add_alphabetics(graph)
    if preset.numbers:
        add_unshifted_number_keys(graph)
    add_remaining_keys(graph, preset.keys)

    edges = connect_keyboard_nodes(preset.rows, graph, preset.style, preset.missing_keys)
    logger.info(f"Built layout '{preset.name}': {graph.number_of_nodes()} keys, {edges} edges")
    return graph
