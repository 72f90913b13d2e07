import logging
import random
from abc import ABC, abstractmethod
from typing import Iterator

from tile_maze.core.grid import Grid, PathCoord

logger = logging.getLogger(__name__)


class Generator(ABC):
    # Yield a progress string every N wall openings
    PROGRESS_EVERY = 100

    def __init__(self, grid: Grid, seed: int = None):
        self.grid = grid
        self.seed = seed
        self.step_count = 0
        self.unexplored = 0

    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The grid is reset first; wall openings happen in-place on self.grid.
        """
        rng = random.Random(self.seed)
        self.grid.reset()
        self.step_count = 0
        self.unexplored = self.grid.path_cell_count - 1

        yield from self.carve(rng)

        self.grid.generated = True
        logger.debug("%s opened %d walls on %dx%d grid (seed=%s)",
                     type(self).__name__, self.step_count,
                     self.grid.num_rows, self.grid.num_cols, self.seed)
        yield "Done"

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass

    @abstractmethod
    def carve(self, rng: random.Random) -> Iterator[str]:
        """Opens walls until every path cell is joined into one tree."""
        pass

    def pick_start(self, rng: random.Random) -> PathCoord:
        start = (rng.randrange(self.grid.path_rows), rng.randrange(self.grid.path_cols))
        self.grid.set_visited(start)
        return start

    def connect(self, a: PathCoord, b: PathCoord):
        """Opens the wall between a and b and marks b as part of the maze."""
        self.grid.open_wall(a, b)
        self.grid.set_visited(b)
        self.unexplored -= 1
        self.step_count += 1
