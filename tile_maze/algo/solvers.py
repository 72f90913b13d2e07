import logging
from abc import ABC, abstractmethod
from array import array
from collections import deque
from typing import Deque, Iterator, List

from tile_maze.core.errors import MazeInvariantError, MazeNotGenerated, OutOfBounds
from tile_maze.core.grid import Grid, PathCoord

logger = logging.getLogger(__name__)


class Solver(ABC):
    """
    Searches from a start path cell to the grid's goal (bottom-right path cell).
    Solvers only touch highlight flags on the grid and their own per-run arrays.
    """

    PROGRESS_EVERY = 100

    def __init__(self, grid: Grid):
        self.grid = grid
        self.path: List[PathCoord] = []
        self.visited_count = 0

    @abstractmethod
    def run(self, start: PathCoord) -> Iterator[str]:
        pass

    def run_all(self, start: PathCoord) -> List[PathCoord]:
        """Runs the solver to completion and returns the start-to-goal path."""
        for _ in self.run(start):
            pass
        return self.path

    def check_start(self, start: PathCoord):
        if not self.grid.generated:
            raise MazeNotGenerated("Generate a maze before solving it")
        row, col = start
        if not self.grid.is_valid_path_cell(row, col):
            raise OutOfBounds(
                f"Start {start} outside path cells "
                f"[0, {self.grid.path_rows}) x [0, {self.grid.path_cols})"
            )


class BFS(Solver):
    def run(self, start: PathCoord) -> Iterator[str]:
        self.check_start(start)
        grid = self.grid
        goal = grid.goal
        start = tuple(start)

        grid.clear_highlight()
        self.path = []

        # Dense parent array over path cells, a self-link means "no parent"
        self.parents = array('i', range(grid.path_cell_count))
        enqueued = bytearray(grid.path_cell_count)

        queue: Deque[PathCoord] = deque([start])
        enqueued[grid.path_index(*start)] = 1
        self.visited_count = 1

        reached = False
        steps = 0
        while queue:
            current = queue.popleft()
            if current == goal:
                reached = True
                break

            current_idx = grid.path_index(*current)
            for n in grid.get_neighbors(*current):
                idx = grid.path_index(*n)
                if not enqueued[idx] and grid.is_open_between(current, n):
                    enqueued[idx] = 1
                    self.parents[idx] = current_idx
                    self.visited_count += 1
                    queue.append(n)

            steps += 1
            if steps % self.PROGRESS_EVERY == 0:
                yield f"Visited: {self.visited_count}"

        if not reached:
            raise MazeInvariantError(f"Goal {goal} is unreachable from {start}")

        self.reconstruct_path(start, goal)
        logger.debug("BFS from %s reached %s: %d cells, %d scanned",
                     start, goal, len(self.path), self.visited_count)
        yield "Solved"

    def reconstruct_path(self, start: PathCoord, goal: PathCoord):
        grid = self.grid
        grid.set_highlight(*grid.path_to_cell(*start))

        curr = goal
        while curr != start:
            self.path.append(curr)
            parent = divmod(self.parents[grid.path_index(*curr)], grid.path_cols)
            grid.set_highlight(*grid.path_to_cell(*curr))
            grid.set_highlight(*grid.wall_between(curr, parent))
            curr = parent

        self.path.append(start)
        self.path.reverse()
