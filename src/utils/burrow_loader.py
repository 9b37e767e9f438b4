from __future__ import annotations

import textwrap
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from core.amphipod import Amphipod, amphipod_kinds
from core.configuration import Configuration, validate_configuration
from core.graph.burrow import BurrowGraph
from core.graph.cells import Cell, Corridor, Room


WALL = "#"
EMPTY = "."
BLANK = " "

# Two fixed rows inserted after the first room row for the 4-deep burrow
UNFOLD_ROWS = ("  #D#C#B#A#", "  #D#B#A#C#")


def _diagram_lines(diagram: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(diagram, str):
        diagram = textwrap.dedent(diagram).splitlines()
    return [line.rstrip() for line in diagram if line.strip()]


def diagram_to_grid(diagram: Union[str, Sequence[str]]) -> np.ndarray:
    """
    Convert a burrow diagram into a numpy character grid.

    Rows are right-padded with blanks, so the grid is rectangular:

        #############
        #...........#
        ###B#C#B#D###
          #A#D#C#A#
          #########
    """
    lines = _diagram_lines(diagram)
    if not lines:
        raise ValueError("Diagram is empty")
    width = max(len(line) for line in lines)
    grid = np.full((len(lines), width), BLANK, dtype="<U1")
    for r, line in enumerate(lines):
        grid[r, : len(line)] = list(line)
    return grid


def unfold_diagram(diagram: Union[str, Sequence[str]], rows: Sequence[str] = UNFOLD_ROWS) -> str:
    """Insert extra room rows right after the first room row."""
    lines = _diagram_lines(diagram)
    if len(lines) < 4:
        raise ValueError("Diagram is too short to unfold")
    return "\n".join(lines[:3] + list(rows) + lines[3:])


@dataclass
class BurrowMap:
    graph: BurrowGraph
    configuration: Configuration
    layout: List[str]


def _open_columns(row: np.ndarray) -> np.ndarray:
    return np.flatnonzero(~np.isin(row, [WALL, BLANK]))


def parse_burrow(
    diagram: Union[str, Sequence[str]],
    kinds: Optional[Dict[str, Amphipod]] = None,
) -> BurrowMap:
    """
    Parse a burrow diagram into the board geometry and the initial configuration.

    Args:
        diagram: text (or list of rows) with the corridor on the second row,
            room rows below it and a closing wall row.
        kinds: letter -> Amphipod; defaults to amphipod_kinds(room_count).

    Raises:
        ValueError: on any structural problem or an invalid configuration.
    """
    grid = diagram_to_grid(diagram)
    if grid.shape[0] < 4:
        raise ValueError(f"Diagram has {grid.shape[0]} rows, need at least 4")
    if _open_columns(grid[0]).size or _open_columns(grid[-1]).size:
        raise ValueError("First and last diagram rows must be walls")

    corridor_cols = _open_columns(grid[1])
    if corridor_cols.size == 0:
        raise ValueError("Corridor row has no open cells")
    if np.any(np.diff(corridor_cols) != 1):
        raise ValueError("Corridor must be a single contiguous lane")

    room_rows = grid[2:-1]
    room_cols = _open_columns(room_rows[0])
    if room_cols.size == 0:
        raise ValueError("Diagram has no rooms")
    for depth, row in enumerate(room_rows, start=1):
        if not np.array_equal(_open_columns(row), room_cols):
            raise ValueError(f"Room row {depth} does not line up with the first room row")
    if room_cols[0] < corridor_cols[0] or room_cols[-1] > corridor_cols[-1]:
        raise ValueError("Rooms must open onto the corridor")

    graph = BurrowGraph(
        room_count=len(room_cols),
        room_depth=len(room_rows),
        corridor_length=len(corridor_cols),
        room_entrances=[int(c - corridor_cols[0]) + 1 for c in room_cols],
    )
    if kinds is None:
        kinds = amphipod_kinds(graph.room_count)

    def lookup(ch: str) -> Amphipod:
        if ch not in kinds:
            raise ValueError(f"Unknown amphipod {ch!r}")
        return kinds[ch]

    pairs: List[Tuple[Cell, Amphipod]] = []
    for pos, col in enumerate(corridor_cols, start=1):
        ch = str(grid[1, col])
        if ch != EMPTY:
            pairs.append((Corridor(pos), lookup(ch)))
    for depth, row in enumerate(room_rows, start=1):
        for room, col in enumerate(room_cols, start=1):
            ch = str(row[col])
            if ch != EMPTY:
                pairs.append((Room(room, depth), lookup(ch)))

    config = Configuration.from_cells(pairs, graph.room_depth)
    validate_configuration(config, graph)
    layout = ["".join(row).rstrip() for row in grid]
    return BurrowMap(graph=graph, configuration=config, layout=layout)


def load_burrow(path: str | Path, unfold: bool = False) -> BurrowMap:
    """Load a burrow diagram from a text file (optionally the 4-deep variant)."""
    text = Path(path).read_text()
    if unfold:
        text = unfold_diagram(text)
    return parse_burrow(text)
