from typing import Dict, Type

from tile_maze.algo.base import Generator
from tile_maze.algo.dfs import RecursiveBacktracker
from tile_maze.algo.growing import GrowingQueue
from tile_maze.algo.kruskal import KruskalsAlgorithm
from tile_maze.algo.prim import PrimsAlgorithm

GENERATORS: Dict[str, Type[Generator]] = {
    "backtrack": RecursiveBacktracker,
    "bfs": GrowingQueue,
    "prim": PrimsAlgorithm,
    "kruskal": KruskalsAlgorithm,
}
