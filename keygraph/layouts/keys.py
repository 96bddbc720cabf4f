# layouts/keys.py
"""
Keys and key lookup.

A Key is one physical key: the character it types unshifted and the
character it types with shift held (None when the key has no shift
variant, e.g. numpad digits).

Keys compare and hash on `value` alone. `shifted` is carried as metadata,
so a graph can never hold two nodes for the same unshifted character.
"""
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Union

import networkx as nx

from keygraph.layouts.grammar import GAP

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"

@dataclass(frozen=True)
class Key:
    value: str
    shifted: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.value if self.shifted is None else f"{self.value}/{self.shifted}"

def find_key(graph: nx.Graph, char: Optional[str]) -> Optional[Key]:
    """
    Find the key that types `char`, unshifted or shifted.

    Useful when the locale is unknown, as numbers and symbols move between
    keys (e.g. UK vs US). Returns the first match in node order, or None.
    The gap sentinel never matches.
    """
    if char is None or char == GAP:
        return None
    for key in graph.nodes:
        if key.value == char or key.shifted == char:
            return key
    return None

#-------------------------------------#
# Populating a graph with known keys  #
#-------------------------------------#
def add_alphabetics(graph: nx.Graph) -> None:
    """Add a-z, shifting to A-Z (common to QWERTY and Dvorak)."""
    for c in ALPHABET:
        graph.add_node(Key(c, c.upper()))

def add_unshifted_number_keys(graph: nx.Graph) -> None:
    """Add 0-9 with no shift modifier, as found on numpads."""
    for c in NUMBERS:
        graph.add_node(Key(c))

def add_remaining_keys(graph: nx.Graph,
                       keys: Union[Iterable[Key], Mapping[str, Optional[str]]]) -> None:
    """Add any keys not populated by the other helpers."""
    if isinstance(keys, Mapping):
        keys = [Key(value, shifted) for value, shifted in keys.items()]
    for key in keys:
        graph.add_node(key)
