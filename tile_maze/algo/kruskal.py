import random
from typing import Iterator, List, Tuple

from tile_maze.core.disjoint_set import DisjointSet
from tile_maze.core.grid import Grid, PathCoord
from tile_maze.algo.base import Generator


def interior_walls(grid: Grid) -> List[Tuple[PathCoord, PathCoord]]:
    """
    Every wall cell that separates two in-bounds path cells, as the pair of
    path cells it separates, in lattice row-major order.
    """
    walls = []
    for row in range(1, grid.num_rows - 1):
        for col in range(1, grid.num_cols - 1):
            if row % 2 == 1 and col % 2 == 0:
                # Horizontal neighbours left and right
                pr = (row - 1) // 2
                walls.append(((pr, col // 2 - 1), (pr, col // 2)))
            elif row % 2 == 0 and col % 2 == 1:
                # Vertical neighbours above and below
                pc = (col - 1) // 2
                walls.append(((row // 2 - 1, pc), (row // 2, pc)))
    return walls


class KruskalsAlgorithm(Generator):
    """Randomized Kruskal's: open shuffled walls unless they close a cycle."""

    def carve(self, rng: random.Random) -> Iterator[str]:
        grid = self.grid
        walls = interior_walls(grid)
        rng.shuffle(walls)

        sets = DisjointSet(grid.path_cell_count)
        if grid.path_cell_count == 1:
            grid.set_visited((0, 0))

        for a, b in walls:
            if sets.union(grid.path_index(*a), grid.path_index(*b)):
                grid.set_visited(a)
                self.connect(a, b)

                if self.step_count % self.PROGRESS_EVERY == 0:
                    yield f"Joined: {self.step_count} Remaining: {self.unexplored}"
