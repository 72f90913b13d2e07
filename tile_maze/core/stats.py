from typing import Dict

from tile_maze.core.errors import MazeInvariantError
from tile_maze.core.grid import Grid, PathCoord


class MazeStats:
    @staticmethod
    def open_sides(grid: Grid, cell: PathCoord) -> int:
        return sum(1 for n in grid.get_neighbors(*cell) if grid.is_open_between(cell, n))

    @staticmethod
    def calculate(grid: Grid) -> Dict[str, float]:
        dead_ends = 0
        corridors = 0   # 2 open sides
        junctions = 0   # 3 or 4 open sides

        for cell in grid.path_cells():
            sides = MazeStats.open_sides(grid, cell)
            if sides == 1: dead_ends += 1
            elif sides == 2: corridors += 1
            elif sides >= 3: junctions += 1

        total = grid.path_cell_count
        return {
            "open_walls": grid.open_wall_count(),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }

    @staticmethod
    def reachable(grid: Grid, start: PathCoord = (0, 0)) -> int:
        """Flood fill over open walls; returns the number of path cells reached."""
        seen = {start}
        stack = [start]
        while stack:
            cell = stack.pop()
            for n in grid.get_neighbors(*cell):
                if n not in seen and grid.is_open_between(cell, n):
                    seen.add(n)
                    stack.append(n)
        return len(seen)

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        True when the open walls form a spanning tree: n - 1 edges and
        every path cell connected (n - 1 edges on n connected nodes admit no cycle).
        """
        n = grid.path_cell_count
        return grid.open_wall_count() == n - 1 and MazeStats.reachable(grid) == n

    @staticmethod
    def tree_distance(grid: Grid, a: PathCoord, b: PathCoord) -> int:
        """
        Edge count of the path between a and b over open walls, found by
        depth-first search. Independent of the BFS solver.
        """
        depth: Dict[PathCoord, int] = {a: 0}
        stack = [a]
        while stack:
            cell = stack.pop()
            if cell == b:
                return depth[cell]
            for n in grid.get_neighbors(*cell):
                if n not in depth and grid.is_open_between(cell, n):
                    depth[n] = depth[cell] + 1
                    stack.append(n)
        raise MazeInvariantError(f"{b} is unreachable from {a}")
