class MazeError(Exception):
    """Base class for every error raised by tile_maze."""


class InvalidDimension(MazeError, ValueError):
    """Grid dimensions must be odd integers >= 3."""


class NotAdjacent(MazeError, ValueError):
    """Two path cells passed to a wall lookup do not share a wall."""


class OutOfBounds(MazeError, IndexError):
    """A coordinate lies outside the path-cell range."""


class MazeNotGenerated(MazeError, RuntimeError):
    """Solving was attempted before any generator completed."""


class MazeInvariantError(MazeError, AssertionError):
    """The open walls do not form a spanning tree (a generator defect)."""
