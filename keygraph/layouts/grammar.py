# layouts/grammar.py
"""
Row grammar for layout text blocks.

One line per row, top to bottom. Keys within a row are separated by spaces,
left to right. GAP marks a deliberately empty cell: it takes up a column
(lining up staggered or offset rows) but never resolves to a key.
"""
from typing import List

GAP = "\0"

# Written literally in YAML files, where a NUL character is awkward to type
ESCAPED_GAP = "\\0"

Grid = List[List[str]]

def parse_rows(keyboard: str) -> Grid:
    """Split a layout text block into rows of single-character cells."""
    keyboard = keyboard.replace(ESCAPED_GAP, GAP)
    return [[c for c in line if c != " "] for line in keyboard.splitlines()]
