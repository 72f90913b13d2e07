import numpy as np

from tile_maze.core.grid import Grid


def render_text(grid: Grid, wall: str = "#", open: str = " ", path: str = ".") -> str:
    """
    Draws the lattice one character per cell, top row first.
    Highlighted cells win over open ones; everything else is drawn as wall.
    """
    flags = grid.to_numpy()
    chars = np.full(flags.shape, wall, dtype=object)
    chars[(flags & (Grid.PATH_CELL | Grid.OPEN_WALL)) != 0] = open
    chars[(flags & Grid.HIGHLIGHT) != 0] = path
    return "\n".join("".join(row) for row in chars)
