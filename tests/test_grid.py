import unittest
import sys
import os

# Add project root to path so we can import tile_maze
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tile_maze.algo.dfs import RecursiveBacktracker
from tile_maze.core.errors import InvalidDimension, NotAdjacent, OutOfBounds
from tile_maze.core.grid import Grid


class TestGrid(unittest.TestCase):
    def test_initialization(self):
        rows, cols = 7, 9
        grid = Grid(rows, cols)
        self.assertEqual(len(grid.cells), rows * cols)
        self.assertEqual((grid.path_rows, grid.path_cols), (3, 4))
        self.assertEqual(grid.path_cell_count, 12)
        self.assertEqual(grid.open_wall_count(), 0)
        self.assertFalse(grid.generated)

        # Path cells exactly at odd/odd coordinates
        for row in range(rows):
            for col in range(cols):
                self.assertEqual(grid.is_path_cell(row, col), row % 2 == 1 and col % 2 == 1)

    def test_invalid_dimensions(self):
        for rows, cols in [(4, 7), (7, 4), (1, 5), (5, 1), (2, 3), (0, 0), (-3, 5)]:
            with self.assertRaises(InvalidDimension):
                Grid(rows, cols)
        # Also usable as a plain ValueError
        with self.assertRaises(ValueError):
            Grid(4, 7)
        with self.assertRaises(InvalidDimension):
            Grid(5.0, 5)
        with self.assertRaises(InvalidDimension):
            Grid(True, 5)

    def test_smallest_grid(self):
        grid = Grid(3, 3)
        self.assertEqual(grid.path_cell_count, 1)
        self.assertEqual(list(grid.path_cells()), [(0, 0)])
        self.assertEqual(grid.open_wall_count(), 0)
        self.assertEqual(grid.goal, (0, 0))
        self.assertEqual(grid.neighbors((0, 0), False), [])

    def test_coordinates(self):
        grid = Grid(5, 5)
        self.assertEqual(grid.get_index(2, 2), 12)  # 2 * 5 + 2
        self.assertEqual(grid.path_to_cell(1, 0), (3, 1))
        self.assertEqual(grid.path_index(1, 1), 3)

        with self.assertRaises(OutOfBounds):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 5)
        with self.assertRaises(OutOfBounds):
            grid.path_to_cell(2, 0)

    def test_wall_between(self):
        grid = Grid(5, 5)
        self.assertEqual(grid.wall_between((0, 0), (0, 1)), (1, 2))
        self.assertEqual(grid.wall_between((0, 1), (0, 0)), (1, 2))
        self.assertEqual(grid.wall_between((0, 0), (1, 0)), (2, 1))
        self.assertEqual(grid.wall_between((1, 1), (0, 1)), (2, 3))

        with self.assertRaises(NotAdjacent):
            grid.wall_between((0, 0), (1, 1))
        with self.assertRaises(NotAdjacent):
            grid.wall_between((0, 0), (0, 0))
        with self.assertRaises(OutOfBounds):
            grid.wall_between((0, 1), (0, 2))

    def test_neighbors_probe_order(self):
        grid = Grid(7, 7)
        # Up, down, left, right
        self.assertEqual(grid.neighbors((1, 1), False), [(0, 1), (2, 1), (1, 0), (1, 2)])
        self.assertEqual(grid.neighbors((0, 0), False), [(1, 0), (0, 1)])
        self.assertEqual(grid.neighbors((2, 2), False), [(1, 2), (2, 1)])

        grid.set_visited((0, 1))
        grid.set_visited((1, 2))
        self.assertEqual(grid.neighbors((1, 1), True), [(0, 1), (1, 2)])
        self.assertEqual(grid.neighbors((1, 1), False), [(2, 1), (1, 0)])

        grid.set_visited((0, 1), False)
        self.assertFalse(grid.is_visited((0, 1)))

    def test_open_wall(self):
        grid = Grid(5, 5)
        grid.open_wall((0, 0), (0, 1))

        self.assertTrue(grid.is_open_wall(1, 2))
        self.assertTrue(grid.is_open_between((0, 0), (0, 1)))
        self.assertTrue(grid.is_open_between((0, 1), (0, 0)))
        self.assertFalse(grid.is_open_between((0, 0), (1, 0)))
        self.assertEqual(grid.open_wall_count(), 1)
        # Opening never touches path cell flags
        self.assertTrue(grid.is_path_cell(1, 1))
        self.assertFalse(grid.is_path_cell(1, 2))

    def test_reset_idempotent(self):
        grid = Grid(9, 11)
        RecursiveBacktracker(grid, seed=3).run_all()
        grid.set_highlight(1, 1)
        self.assertTrue(grid.generated)

        grid.reset()
        once = grid.cells.tobytes()
        grid.reset()
        twice = grid.cells.tobytes()

        self.assertEqual(once, twice)
        self.assertEqual(once, Grid(9, 11).cells.tobytes())
        self.assertFalse(grid.generated)
        self.assertEqual(grid.open_wall_count(), 0)

    def test_highlight(self):
        grid = Grid(5, 5)
        grid.set_highlight(1, 1)
        grid.set_highlight(1, 2)
        self.assertTrue(grid.is_highlighted(1, 1))
        grid.set_highlight(1, 2, False)
        self.assertFalse(grid.is_highlighted(1, 2))

        grid.clear_highlight()
        self.assertFalse(grid.is_highlighted(1, 1))
        self.assertTrue(grid.is_path_cell(1, 1))

    def test_cell_accessor(self):
        grid = Grid(5, 7)
        grid.open_wall((0, 0), (0, 1))

        cell = grid.cell(1, 1)
        self.assertTrue(cell.is_path_cell)
        self.assertFalse(cell.is_open_wall)
        self.assertEqual((cell.x, cell.y), (1, 1))

        wall = grid.cell(1, 2)
        self.assertTrue(wall.is_open_wall)
        self.assertFalse(wall.is_path_cell)
        self.assertEqual((wall.row, wall.col, wall.x, wall.y), (1, 2, 2, 1))

        corner = grid.cell(0, 0)
        self.assertFalse(corner.is_path_cell or corner.is_open_wall or corner.highlighted)

        cells = list(grid.iter_cells())
        self.assertEqual(len(cells), 35)
        self.assertEqual(sum(1 for c in cells if c.is_path_cell), 6)

    def test_to_numpy_view(self):
        grid = Grid(5, 7)
        arr = grid.to_numpy()
        self.assertEqual(arr.shape, (5, 7))
        self.assertEqual(arr[1, 1], Grid.PATH_CELL)
        self.assertEqual(arr[0, 0], 0)

        # Zero-copy: later changes show up in the same view, also across reset
        grid.open_wall((0, 0), (0, 1))
        self.assertTrue(arr[1, 2] & Grid.OPEN_WALL)
        grid.reset()
        self.assertFalse(arr[1, 2] & Grid.OPEN_WALL)

    def test_resized(self):
        grid = Grid(31, 31)
        bigger = grid.resized(2)
        self.assertEqual((bigger.num_rows, bigger.num_cols), (33, 33))
        smaller = grid.resized(-2)
        self.assertEqual((smaller.num_rows, smaller.num_cols), (29, 29))

        # Bounds are exclusive: 9 and 101 are rejected
        edge = Grid(11, 11)
        self.assertIs(edge.resized(-2), edge)
        edge = Grid(99, 99)
        self.assertIs(edge.resized(2), edge)

        with self.assertRaises(InvalidDimension):
            grid.resized(1)


if __name__ == '__main__':
    unittest.main()
