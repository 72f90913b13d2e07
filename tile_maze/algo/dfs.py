import random
from typing import Iterator, List

from tile_maze.core.grid import PathCoord
from tile_maze.algo.base import Generator


class RecursiveBacktracker(Generator):
    """Randomized depth-first search. Long winding corridors, few branches."""

    def carve(self, rng: random.Random) -> Iterator[str]:
        current = self.pick_start(rng)

        # Cells that may still have unvisited neighbours
        stack: List[PathCoord] = []

        while self.unexplored > 0:
            neighbors = self.grid.neighbors(current, False)

            if neighbors:
                stack.append(current)
                nxt = rng.choice(neighbors)
                self.connect(current, nxt)
                current = nxt

                # Yield every N steps to keep callers responsive without spamming
                if self.step_count % self.PROGRESS_EVERY == 0:
                    yield f"Carving... Stack: {len(stack)}"
            else:
                # Backtrack
                current = stack.pop()
