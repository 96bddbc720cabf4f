# layouts/geometry.py
"""
Relative positions of neighbouring keys.
Defines:
  - Direction along one axis (previous / same / next)
  - Edge: a (horizontal, vertical) offset from a reference key
  - The two physical key arrangements:
    - slanted rows, where each key touches 6 neighbours
    - aligned grids (numpads), where each key touches 8 neighbours
Used by the graph connector to find neighbours in a layout grid.
"""
from enum import Enum, IntEnum
from typing import Iterable, NamedTuple, Tuple, Union

class Direction(IntEnum):
    """Position relative to a key on one axis."""
    PREVIOUS = -1  # above or left
    SAME = 0
    NEXT = 1       # below or right

    def __neg__(self) -> 'Direction':
        return Direction(-int(self))

class Edge(NamedTuple):
    """Relative position of a neighbouring key."""
    horizontal: Direction
    vertical: Direction

    def __neg__(self) -> 'Edge':
        return Edge(-self.horizontal, -self.vertical)

    @property
    def offset(self) -> Tuple[int, int]:
        """(row, column) offset of the neighbour in the layout grid."""
        return int(self.vertical), int(self.horizontal)

    def __str__(self) -> str:
        return f"{self.horizontal.name.title()},{self.vertical.name.title()}"

#-----------------------------------#
# Neighbour offsets per key style   #
#-----------------------------------#
P, S, N = Direction.PREVIOUS, Direction.SAME, Direction.NEXT

SLANTED_POSITIONS: Tuple[Edge, ...] = (
    Edge(P, S),
    Edge(S, P),
    Edge(N, P),
    Edge(N, S),
    Edge(S, N),
    Edge(P, N),
)

ALIGNED_POSITIONS: Tuple[Edge, ...] = (
    Edge(P, S),
    Edge(P, P),
    Edge(S, P),
    Edge(N, P),
    Edge(N, S),
    Edge(N, N),
    Edge(S, N),
    Edge(P, N),
)

class KeyboardStyle(str, Enum):
    """
    Physical key arrangement. The main part of a keyboard applies a slant to
    the rows so a key only has 6 neighbours; numpads are aligned in a grid.
    """
    SLANTED = "slanted"
    ALIGNED = "aligned"

    def positions(self) -> Tuple[Edge, ...]:
        if self is KeyboardStyle.SLANTED:
            return SLANTED_POSITIONS
        return ALIGNED_POSITIONS

def relative_positions(style: Union[KeyboardStyle, str]) -> Tuple[Edge, ...]:
    """Neighbour offsets for a style given as enum member or name."""
    return KeyboardStyle(style).positions()

def is_symmetric(positions: Iterable[Edge]) -> bool:
    """
    Check that every offset's reverse is also present. Without this a
    neighbour found from one key won't lead back to it.
    """
    offsets = set(positions)
    return all(-edge in offsets for edge in offsets)
