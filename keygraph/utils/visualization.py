# keygraph/utils/visualization.py
"""
Diagnostic output for compiled layout graphs.

Provides:
  - describe_graph: one text line per key listing its neighbours
  - plot_layout_graph: draw the graph with keys at their grid positions
"""
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from keygraph.layouts.geometry import KeyboardStyle
from keygraph.utils.config import Config
from keygraph.utils.logging import LoggingManager
logger = LoggingManager.getLogger(__name__)

# Horizontal shift per row on slanted keyboards, in key widths
ROW_STAGGER = 0.5

def describe_graph(graph: nx.DiGraph) -> str:
    """List each key with its neighbours and their directions."""
    lines = []
    name = graph.graph.get('name')
    if name:
        lines.append(f"{name}: {graph.number_of_nodes()} keys, {graph.number_of_edges()} edges")
    for key in graph.nodes:
        neighbours = ", ".join(f"{target.value} ({data['direction']})"
                               for target, data in graph.adj[key].items())
        lines.append(f"{key}: {neighbours or '-'}")
    return "\n".join(lines)

def key_positions(graph: nx.DiGraph) -> Dict:
    """
    Plot coordinates of every placed key. Rows are drawn top to bottom and
    slanted rows are shifted right by ROW_STAGGER per row.
    """
    placed = [(key, pos) for key, pos in graph.nodes(data='position') if pos is not None]
    if not placed:
        return {}

    grid = np.array([pos for _, pos in placed], dtype=float)
    rows, columns = grid[:, 0], grid[:, 1]
    x = columns.copy()
    if graph.graph.get('style', KeyboardStyle.SLANTED) == KeyboardStyle.SLANTED:
        x += rows * ROW_STAGGER
    y = -rows
    return {key: (x[i], y[i]) for i, (key, _) in enumerate(placed)}

def plot_layout_graph(graph: nx.DiGraph,
                      output_path: Optional[Union[str, Path]] = None,
                      title: Optional[str] = None,
                      figsize: Tuple[int, int] = (14, 6),
                      config: Optional[Config] = None) -> Path:
    """
    Plot a layout graph and save it to an image file.

    Args:
        graph: compiled layout graph
        output_path: image file to write; defaults to
            <paths.plots_dir>/<layout name>.png from config
        title: plot title, defaults to the graph's name
        config: configuration supplying plots_dir

    Returns:
        Path of the written image
    """
    name = graph.graph.get('name') or "layout"
    if output_path is None:
        plots_dir = (config or Config()).paths.plots_dir
        output_path = Path(plots_dir) / f"{name}.png"
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    pos = key_positions(graph)
    placed = graph.subgraph(pos.keys())
    labels = {key: key.value for key in placed.nodes}

    fig, ax = plt.subplots(figsize=figsize)
    try:
        nx.draw(placed, pos, ax=ax, labels=labels, with_labels=True, node_color='lightblue',
                font_weight='bold', node_size=500, font_size=12,
                edge_color='gray', arrows=False, width=1.5)
        ax.set_title(title or name, fontsize=16)
        fig.savefig(output_path)
    finally:
        plt.close(fig)

    logger.info(f"Saved layout plot to {output_path}")
    return output_path
