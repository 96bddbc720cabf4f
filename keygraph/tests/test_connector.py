"""Tests for connecting layout grids into adjacency graphs."""
import logging

import pytest

from keygraph.layouts.connector import connect_keyboard_nodes, neighbours, neighbour_in_direction
from keygraph.layouts.geometry import Direction, Edge
from keygraph.layouts.grammar import GAP
from keygraph.layouts.keymaps import STANDARD_NUMPAD_ROWS
from keygraph.layouts.keys import Key, find_key, add_alphabetics, add_unshifted_number_keys
from keygraph.utils.config import MissingKeys, UnknownKeyError

P, S, N = Direction.PREVIOUS, Direction.SAME, Direction.NEXT


def test_standard_numpad_five(graph):
    add_unshifted_number_keys(graph)
    connect_keyboard_nodes(f"{GAP} / * -\n7 8 9 +\n4 5 6\n1 2 3\n{GAP} 0 .",
                           graph, "aligned", MissingKeys.CREATE)

    found = {key.value: edge for key, edge in neighbours(graph, '5').items()}
    assert found == {
        '4': Edge(P, S),
        '7': Edge(P, P),
        '8': Edge(S, P),
        '9': Edge(N, P),
        '6': Edge(N, S),
        '3': Edge(N, N),
        '2': Edge(S, N),
        '1': Edge(P, N),
    }


def test_edge_direction_matches_grid_offset(graph):
    connect_keyboard_nodes(STANDARD_NUMPAD_ROWS, graph, "aligned", "create")
    positions = dict(graph.nodes(data='position'))
    for source, target, direction in graph.edges(data='direction'):
        (r1, c1), (r2, c2) = positions[source], positions[target]
        assert direction.offset == (r2 - r1, c2 - c1)


def test_ragged_rows(graph):
    connect_keyboard_nodes("7 8 9 +\n4 5 6", graph, "aligned", "create")
    plus = neighbours(graph, '+')
    assert set(key.value for key in plus) == {'9', '6'}
    assert plus[Key('6')] == Edge(P, N)


def test_gap_never_becomes_a_node(graph):
    connect_keyboard_nodes(f"{GAP} 0 .\n1 2 3", graph, "aligned", "create")
    assert Key(GAP) not in graph
    assert graph.number_of_nodes() == 5


def test_skip_policy_ignores_unknown_characters(graph):
    add_alphabetics(graph)
    connect_keyboard_nodes("a b\n§ c", graph, "aligned", MissingKeys.SKIP)
    assert find_key(graph, '§') is None
    assert graph.number_of_nodes() == 26
    assert set(key.value for key in neighbours(graph, 'a')) == {'b', 'c'}


def test_create_policy_adds_unshifted_keys(graph):
    connect_keyboard_nodes("= / *", graph, "aligned", MissingKeys.CREATE)
    assert [key.value for key in graph.nodes] == ['=', '/', '*']
    assert all(key.shifted is None for key in graph.nodes)


def test_raise_policy_reports_typo(graph):
    add_alphabetics(graph)
    with pytest.raises(UnknownKeyError) as excinfo:
        connect_keyboard_nodes("a b\n§ c", graph, "aligned", MissingKeys.RAISE)
    assert excinfo.value.char == '§'
    assert (excinfo.value.row, excinfo.value.column) == (1, 0)


def test_raise_policy_accepts_complete_table(graph):
    add_alphabetics(graph)
    added = connect_keyboard_nodes("a b\nc d", graph, "aligned", MissingKeys.RAISE)
    assert added == 12


def test_lookup_by_shifted_character_connects(graph):
    add_alphabetics(graph)
    connect_keyboard_nodes("A B", graph, "slanted", "skip")
    assert neighbours(graph, 'a') == {Key('b'): Edge(N, S)}


def test_edges_counted_once(graph):
    add_alphabetics(graph)
    assert connect_keyboard_nodes("a b", graph) == 2
    assert connect_keyboard_nodes("a b", graph) == 0
    assert graph.number_of_edges() == 2


def test_asymmetric_offsets_warn(graph, caplog):
    with caplog.at_level(logging.WARNING):
        connect_keyboard_nodes("a b", graph, [Edge(N, S)], "create")
    assert "not symmetric" in caplog.text
    assert list(graph.edges) == [(Key('a'), Key('b'))]


def test_neighbour_in_direction(graph):
    connect_keyboard_nodes(STANDARD_NUMPAD_ROWS, graph, "aligned", "create")
    assert neighbour_in_direction(graph, '5', Edge(S, P)) == Key('8')
    assert neighbour_in_direction(graph, '+', Edge(N, S)) is None


def test_neighbours_of_missing_key(graph):
    assert neighbours(graph, 'x') == {}
    assert neighbours(graph, Key('x')) == {}


def test_style_name_uses_geometry_offsets(graph, monkeypatch):
    import keygraph.layouts.connector as connector
    requested = []

    def recording_positions(style):
        requested.append(style)
        return (Edge(N, S), Edge(P, S))

    monkeypatch.setattr(connector, "relative_positions", recording_positions)
    connect_keyboard_nodes("a\nb", graph, "aligned", "create")
    assert requested == ["aligned"]
    assert graph.number_of_edges() == 0
