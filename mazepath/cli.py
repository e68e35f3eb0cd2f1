import argparse
import sys
from typing import List, Optional

from .config import DEFAULT_COLS, DEFAULT_ROWS, STEP_DELAY, WALL_PROBABILITY
from .console import animate_moves, format_distances, format_grid, print_frame
from .errors import PathfindingError
from .grid import Grid, Position, validate_grid
from .maze_generator import generate_maze_with_trace
from .shortest_path import iter_frontiers
from .solver import PathResult, solve_maze


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='mazepath',
                                     description='Generate a random maze and walk its shortest path')
    parser.add_argument('--rows', type=int, default=DEFAULT_ROWS, help='Number of grid rows')
    parser.add_argument('--cols', type=int, default=DEFAULT_COLS, help='Number of grid columns')
    parser.add_argument('--seed', type=int, help='Random seed for a reproducible maze')
    parser.add_argument('--wall-probability', type=float, default=WALL_PROBABILITY,
                        help='Chance that an interior cell starts as a wall')
    parser.add_argument('--delay', type=float, default=STEP_DELAY, help='Seconds between animation frames')
    parser.add_argument('--distances', action='store_true', help='Print the distance field before walking')
    parser.add_argument('--video', type=str, help='Also render the run to a video file (.mp4 or .gif)')
    return parser


def render_video(grid: Grid, traced: List[Position], result: PathResult, output_file: str) -> bool:
    from .animation import capture_frames, create_animation, save_animation

    levels = list(iter_frontiers(grid, result.goal))
    frames = capture_frames(grid, traced, levels, result.moves)
    print(f"🎨 Building animation ({len(frames)} frames)...")
    ani, fig = create_animation(frames, grid)
    print(f"💾 Saving animation to {output_file}...")
    return save_animation(ani, fig, output_file, len(frames))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        print(f"🧩 Generating maze ({args.rows}x{args.cols})...")
        grid, traced = generate_maze_with_trace(args.rows, args.cols, args.wall_probability, args.seed)
        start, goal = validate_grid(grid)
        print_frame(format_grid(grid.cells))

        print(f"🔍 Solving maze from {start} to {goal} using Breadth-First Search (BFS)...")
        result = solve_maze(grid, start, goal)
    except (PathfindingError, ValueError) as e:
        print(f"❌ {e}")
        return 1

    if args.distances:
        print_frame(format_distances(grid, result.distances))

    try:
        moves_used = animate_moves(grid, result.moves, args.delay)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130

    print("Done.")
    print(f"Moves used: {moves_used}")

    if args.video and not render_video(grid, traced, result, args.video):
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
