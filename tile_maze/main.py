import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'tile_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tile_maze.algo.registry import GENERATORS
from tile_maze.algo.solvers import BFS
from tile_maze.core.errors import MazeError
from tile_maze.core.grid import Grid
from tile_maze.core.stats import MazeStats
from tile_maze.viz.text import render_text

logger = logging.getLogger("tile_maze")


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tile Maze: perfect maze generator and solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate (and optionally solve) a maze")
    gen_parser.add_argument("--rows", type=int, default=31, help="Lattice rows (odd, >= 3)")
    gen_parser.add_argument("--cols", type=int, default=31, help="Lattice columns (odd, >= 3)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--algo", type=str, default="backtrack", choices=sorted(GENERATORS), help="Generation Algorithm")
    gen_parser.add_argument("--solve", type=int, nargs=2, metavar=("ROW", "COL"), help="Solve from this path cell to the bottom-right one")
    gen_parser.add_argument("--stats", action="store_true", help="Log dead end / corridor / junction counts")
    gen_parser.add_argument("--no-print", action="store_true", help="Do not print the maze")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every generator and the solver")
    bench_parser.add_argument("--size", type=int, default=201, help="Lattice size (odd)")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser


def cmd_generate(args) -> int:
    logger.info(f"Generating {args.rows}x{args.cols} maze with {args.algo.upper()}...")
    grid = Grid(args.rows, args.cols)
    GENERATORS[args.algo](grid, seed=args.seed).run_all()
    logger.info(f"Opened {grid.open_wall_count()} walls over {grid.path_cell_count} path cells.")

    if args.solve:
        start = tuple(args.solve)
        logger.info(f"Solving with BFS from {start} to {grid.goal}...")
        path = BFS(grid).run_all(start)
        logger.info(f"Path Length: {len(path)}")

    if args.stats:
        logger.info(f"Stats: {MazeStats.calculate(grid)}")

    if not args.no_print:
        print(render_text(grid))
    return 0


def cmd_benchmark(args) -> int:
    logger.info(f"Running Benchmark Suite (Size: {args.size}x{args.size})...")
    grid = Grid(args.size, args.size)

    print(f"\n{'ALGORITHM':<12} | {'GEN (s)':<10} | {'SOLVE (s)':<10} | {'PATH LEN':<10} | {'DEAD ENDS':<10}")
    print("-" * 64)

    for name, cls in GENERATORS.items():
        t_start = time.time()
        cls(grid, seed=args.seed).run_all()
        gen_time = time.time() - t_start

        t_start = time.time()
        path = BFS(grid).run_all((0, 0))
        solve_time = time.time() - t_start

        stats = MazeStats.calculate(grid)
        print(f"{name:<12} | {gen_time:<10.4f} | {solve_time:<10.4f} | {len(path):<10} | {stats['dead_ends']:<10}")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    try:
        if args.command == "generate":
            return cmd_generate(args)
        elif args.command == "benchmark":
            return cmd_benchmark(args)
    except MazeError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
