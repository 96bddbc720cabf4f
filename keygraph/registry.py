# keygraph/registry.py
"""
Process-wide registry of compiled layout graphs.

Each preset is compiled on first access, made read-only, and cached.
Later accesses share the same graph. The first build of a name happens at
most once, even when several threads ask for it together.

Usage:
    graph = QWERTY()
    key = find_key(graph, '?')
    graph = get_layout('mac_numpad')

    configure('config.yaml')   # logging + custom layouts from YAML
    graph = get_layout('phone_keypad')
"""
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Union
import logging
import threading

import networkx as nx

from keygraph.layouts.presets import BUILTIN_PRESETS, build_layout
from keygraph.utils.config import Config, LayoutError, LayoutPreset, load_config
from keygraph.utils.logging import LoggingManager

logger = logging.getLogger(__name__)

def freeze_layout(graph: nx.DiGraph) -> nx.DiGraph:
    """
    Make a compiled graph fully read-only. networkx.freeze only blocks
    adding and removing nodes and edges, so the graph, node and edge
    attribute dicts are swapped for read-only mappings first.
    """
    graph.graph = MappingProxyType(dict(graph.graph))
    for node, data in graph._node.items():
        graph._node[node] = MappingProxyType(dict(data))
    for source, targets in graph._succ.items():
        for target, data in targets.items():
            # successor and predecessor entries share one dict per edge
            read_only = MappingProxyType(dict(data))
            targets[target] = read_only
            graph._pred[target][source] = read_only
    return nx.freeze(graph)

class LayoutRegistry:
    """
    Lazily built, immutable layout graphs keyed by preset name.
    Tracks hits and misses like a cache; nothing is ever evicted.
    """

    def __init__(self, presets: Iterable[LayoutPreset] = BUILTIN_PRESETS):
        self._presets: Dict[str, LayoutPreset] = {}
        self._graphs: Dict[str, nx.DiGraph] = {}
        self._lock = threading.Lock()
        self._stats_lock = threading.Lock()
        self.hits = 0
        self.misses = 0
        for preset in presets:
            self.register(preset)

    def register(self, preset: LayoutPreset) -> None:
        """
        Add a preset. Names are unique and can't be replaced; registering
        an identical preset again is a no-op.
        """
        with self._lock:
            existing = self._presets.get(preset.name)
            if existing == preset:
                return
            if existing is not None:
                raise LayoutError(f"Layout '{preset.name}' is already registered")
            self._presets[preset.name] = preset

    def _hit(self) -> None:
        with self._stats_lock:
            self.hits += 1

    def get(self, name: str) -> nx.DiGraph:
        """Return the read-only graph for `name`, building it on first use."""
        graph = self._graphs.get(name)
        if graph is not None:
            self._hit()
            return graph

        with self._lock:
            # Another thread may have finished the build while we waited
            graph = self._graphs.get(name)
            if graph is not None:
                self._hit()
                return graph

            preset = self._presets.get(name)
            if preset is None:
                raise LayoutError(f"Unknown layout '{name}', expected one of {sorted(self._presets)}")

            self.misses += 1
            graph = freeze_layout(build_layout(preset))
            self._graphs[name] = graph
            return graph

    def names(self) -> List[str]:
        return list(self._presets)

    def is_built(self, name: str) -> bool:
        return name in self._graphs

    def __contains__(self, name: str) -> bool:
        return name in self._presets

    def __len__(self) -> int:
        return len(self._presets)

_registry: Optional[LayoutRegistry] = None
_registry_lock = threading.Lock()

def default_registry() -> LayoutRegistry:
    """The process-wide registry holding the built-in layouts."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = LayoutRegistry()
    return _registry

def get_layout(name: str) -> nx.DiGraph:
    return default_registry().get(name)

def register_preset(preset: LayoutPreset) -> None:
    default_registry().register(preset)

def available_layouts() -> List[str]:
    return default_registry().names()

def configure(config: Union[Config, str, Path],
              setup_logging: bool = True) -> Config:
    """
    Apply a configuration: set up logging and register its custom layouts
    with the process-wide registry.

    Args:
        config: Config object, or path to a YAML configuration file
        setup_logging: whether to install the configured log handlers

    Returns:
        The applied configuration
    """
    if not isinstance(config, Config):
        config = load_config(config)

    if setup_logging:
        LoggingManager(config).setup_logging()

    registry = default_registry()
    for preset in config.layouts:
        try:
            registry.register(preset)
        except LayoutError as e:
            LoggingManager.handle_error(e, "Registering custom layout", logger)
            raise
    logger.info(f"Registered {len(config.layouts)} custom layouts")
    return config

#-------------------------#
# Named layout accessors  #
#-------------------------#
def QWERTY() -> nx.DiGraph:
    return get_layout("qwerty")

def DVORAK() -> nx.DiGraph:
    return get_layout("dvorak")

def STANDARD_NUMPAD() -> nx.DiGraph:
    return get_layout("standard_numpad")

def MAC_NUMPAD() -> nx.DiGraph:
    return get_layout("mac_numpad")
