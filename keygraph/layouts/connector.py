# layouts/connector.py
"""
Graph connector: turns a layout text block into keyboard adjacency edges.

For every key placed in the layout grid and every neighbour offset of the
layout's style, the neighbouring cell is looked up and a directed edge
labelled with the offset is added. Reverse edges are never added
explicitly; they are found again when the neighbour's own cell is visited,
which relies on the offset set being symmetric.

Nothing here is fatal by default. Cells outside the grid are ignored and
unknown characters are skipped or created depending on the missing-key
policy. The strict policy raises UnknownKeyError instead, for checking
hand-written layout tables.
"""
from typing import Dict, Optional, Sequence, Union
import logging

import networkx as nx

from keygraph.layouts.geometry import Edge, KeyboardStyle, is_symmetric, relative_positions
from keygraph.layouts.grammar import GAP, Grid, parse_rows
from keygraph.layouts.keys import Key, find_key
from keygraph.utils.config import MissingKeys, UnknownKeyError

logger = logging.getLogger(__name__)

def resolve_key(graph: nx.DiGraph,
                char: str,
                missing_keys: MissingKeys,
                row: int,
                column: int) -> Optional[Key]:
    """
    Find the node for a grid character, applying the missing-key policy
    when it isn't one yet. Gaps resolve to None under every policy.
    """
    if char == GAP:
        return None
    key = find_key(graph, char)
    if key is not None:
        return key

    if missing_keys is MissingKeys.CREATE:
        key = Key(char)
        graph.add_node(key)
        return key
    if missing_keys is MissingKeys.RAISE:
        raise UnknownKeyError(char, row, column)

    logger.debug(f"Key {char!r} at ({row}, {column}) doesn't exist, skipping")
    return None

def connect_keyboard_nodes(keyboard: str,
                           graph: nx.DiGraph,
                           style: Union[KeyboardStyle, str, Sequence[Edge]] = KeyboardStyle.SLANTED,
                           missing_keys: Union[MissingKeys, str] = MissingKeys.SKIP) -> int:
    """
    Connect the keys of a layout given as text.

    Args:
        keyboard: layout rows separated by line breaks, keys separated by
            spaces, GAP for an empty cell
        graph: graph holding the keyboard, edited in place
        style: key arrangement, or an explicit sequence of offsets
        missing_keys: what to do with characters that aren't nodes yet

    Returns:
        Number of edges added
    """
    if isinstance(style, (KeyboardStyle, str)):
        offsets = relative_positions(style)
    else:
        offsets = tuple(style)
        if not is_symmetric(offsets):
            logger.warning("Neighbour offsets are not symmetric; some edges will have no reverse")
    missing_keys = MissingKeys(missing_keys)

    rows = parse_rows(keyboard)
    return _connect_grid(rows, graph, offsets, missing_keys)

def _connect_grid(rows: Grid,
                  graph: nx.DiGraph,
                  offsets: Sequence[Edge],
                  missing_keys: MissingKeys) -> int:
    row_count = len(rows)
    added = 0

    for i, row in enumerate(rows):
        for j, char in enumerate(row):
            key = resolve_key(graph, char, missing_keys, i, j)
            if key is None:
                continue
            graph.nodes[key].setdefault('position', (i, j))

            for direction in offsets:
                dy, dx = direction.offset
                y, x = i + dy, j + dx
                if not 0 <= y < row_count or x < 0:
                    continue
                target_row = rows[y]
                if x >= len(target_row):
                    continue

                neighbour = resolve_key(graph, target_row[x], missing_keys, y, x)
                if neighbour is None:
                    continue
                if not graph.has_edge(key, neighbour):
                    added += 1
                graph.add_edge(key, neighbour, direction=direction)

    return added

#------------------------------#
# Querying a connected layout  #
#------------------------------#
def _as_key(graph: nx.DiGraph, key: Union[Key, str]) -> Optional[Key]:
    if isinstance(key, Key):
        return key if key in graph else None
    return find_key(graph, key)

def neighbours(graph: nx.DiGraph, key: Union[Key, str]) -> Dict[Key, Edge]:
    """Keys adjacent to `key` (a Key or a typed character) and their directions."""
    key = _as_key(graph, key)
    if key is None:
        return {}
    return {n: data['direction'] for n, data in graph.adj[key].items()}

def neighbour_in_direction(graph: nx.DiGraph,
                           key: Union[Key, str],
                           direction: Edge) -> Optional[Key]:
    """The key found from `key` in the given direction, if any."""
    for neighbour, edge in neighbours(graph, key).items():
        if edge == direction:
            return neighbour
    return None
