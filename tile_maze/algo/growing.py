import random
from collections import deque
from typing import Deque, Iterator

from tile_maze.core.grid import PathCoord
from tile_maze.algo.base import Generator


class GrowingQueue(Generator):
    """
    Same step as the backtracker, but resumes from the oldest open cell
    instead of the newest. Shorter corridors, more uniform branching.
    """

    def carve(self, rng: random.Random) -> Iterator[str]:
        current = self.pick_start(rng)
        queue: Deque[PathCoord] = deque()

        while self.unexplored > 0:
            neighbors = self.grid.neighbors(current, False)

            if neighbors:
                queue.append(current)
                nxt = rng.choice(neighbors)
                self.connect(current, nxt)
                current = nxt

                if self.step_count % self.PROGRESS_EVERY == 0:
                    yield f"Growing... Queue: {len(queue)}"
            else:
                current = queue.popleft()
