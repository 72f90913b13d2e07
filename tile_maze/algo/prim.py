import random
from typing import Iterator, List

from tile_maze.core.grid import PathCoord
from tile_maze.algo.base import Generator


class PrimsAlgorithm(Generator):
    """
    Randomized Prim's over cells. Every frontier cell touches the maze, so it
    always has at least one visited neighbour to connect to.
    """

    def carve(self, rng: random.Random) -> Iterator[str]:
        grid = self.grid
        start = self.pick_start(rng)

        # Frontier: discovered but unvisited cells, deduplicated by flag
        frontier: List[PathCoord] = []
        in_frontier = bytearray(grid.path_cell_count)

        def add_neighbors(cell: PathCoord):
            for n in grid.neighbors(cell, False):
                idx = grid.path_index(*n)
                if not in_frontier[idx]:
                    in_frontier[idx] = 1
                    frontier.append(n)

        add_neighbors(start)

        while self.unexplored > 0:
            # Pick random cell from frontier, swap remove for O(1)
            idx = rng.randrange(len(frontier))
            cell = frontier[idx]
            frontier[idx] = frontier[-1]
            frontier.pop()

            # Carve TO one random visited neighbour
            anchor = rng.choice(grid.neighbors(cell, True))
            self.connect(anchor, cell)
            add_neighbors(cell)

            if self.step_count % self.PROGRESS_EVERY == 0:
                yield f"Frontier: {len(frontier)}"
