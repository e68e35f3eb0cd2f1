import shutil
from typing import Iterable, List, Tuple

import matplotlib.animation as animation
import matplotlib.patches as patches
import matplotlib.pyplot as plt
from tqdm import tqdm

from .config import (BG_COLOR, CARVE_COLOR, DPI, END_COLOR, FIG_HEIGHT, FIG_WIDTH, FRONTIER_COLOR, HOLD_FRAMES,
                     OPEN_COLOR, PATH_COLOR, START_COLOR, TARGET_FPS, VIDEO_BITRATE, VISITED_COLOR, WALL_COLOR)
from .grid import Cell, Grid, Position


def capture_frames(grid: Grid, traced: List[Position], levels: Iterable[Tuple[int, List[Position]]],
                   moves: List[Position]) -> List[dict]:
    """Build the frame states for the three phases: corridor carving, BFS exploration, marker walk."""
    frames = []
    for i in range(1, len(traced) + 1):
        frames.append({
            'phase': 'generation',
            'carved': traced[:i],
            'visited': [],
            'frontier': [],
            'path': [],
            'current': traced[i - 1],
        })

    visited = []
    for distance, frontier in levels:
        visited.extend(frontier)
        frames.append({
            'phase': 'exploring',
            'carved': [],
            'visited': list(visited),
            'frontier': list(frontier),
            'path': [],
            'current': None,
            'distance': distance,
        })

    for i in range(1, len(moves) + 1):
        frames.append({
            'phase': 'solution',
            'carved': [],
            'visited': visited,
            'frontier': [],
            'path': moves[:i],
            'current': moves[i - 1],
        })

    if frames:
        frames.extend([frames[-1]] * HOLD_FRAMES)
    return frames


def cell_color(kind: Cell, pos: Position, frame: dict) -> Tuple[str, float]:
    if kind == Cell.WALL:
        return WALL_COLOR, 0.8
    if pos == frame['current']:
        return START_COLOR, 1.0
    if kind == Cell.START:
        return START_COLOR, 1.0 if frame['phase'] != 'solution' else 0.3
    if kind == Cell.GOAL:
        return END_COLOR, 1.0
    if pos in frame['path']:
        return PATH_COLOR, 0.9
    if pos in frame['frontier']:
        return FRONTIER_COLOR, 0.8
    if pos in frame['visited']:
        return VISITED_COLOR, 0.7
    if pos in frame['carved']:
        return CARVE_COLOR, 0.6
    return OPEN_COLOR, 1.0


def create_animation(frames: List[dict], grid: Grid,
                     title: str = "Breadth-First Search (BFS)") -> Tuple[animation.FuncAnimation, plt.Figure]:
    rows, cols = grid.dimensions()
    cell_size = min(FIG_HEIGHT / (rows + 2), FIG_WIDTH / cols) * 0.9
    fig, axes = plt.subplots(figsize=(FIG_WIDTH, FIG_HEIGHT), dpi=DPI)
    fig.patch.set_facecolor(BG_COLOR)
    x_offset = (FIG_WIDTH - cols * cell_size) / 2
    y_offset = (FIG_HEIGHT - rows * cell_size) / 2
    headings = {
        'generation': "Carving Corridor",
        'exploring': "Exploring Maze",
        'solution': "Solution Path",
    }

    def update(i: int) -> None:
        if i >= len(frames):
            return
        frame = frames[i]
        axes.clear()
        axes.set_xlim(0, FIG_WIDTH)
        axes.set_ylim(0, FIG_HEIGHT)
        axes.set_facecolor(BG_COLOR)
        axes.axis('off')

        axes.text(FIG_WIDTH / 2, y_offset + rows * cell_size + 0.9, headings[frame['phase']],
                  color='white', fontsize=18, ha='center', weight='bold')
        if frame['phase'] == 'exploring':
            subtitle = f"{title} - distance {frame['distance']}"
        elif frame['phase'] == 'solution':
            subtitle = f"{title} - moves used {len(frame['path']) - 1}"
        else:
            subtitle = f"{rows}x{cols} maze"
        axes.text(FIG_WIDTH / 2, y_offset + rows * cell_size + 0.4, subtitle,
                  color='white', fontsize=11, ha='center')

        for y in range(rows):
            for x in range(cols):
                color, alpha = cell_color(Cell(int(grid.cells[y, x])), (x, y), frame)
                axes.add_patch(patches.Rectangle(
                    (x_offset + x * cell_size, y_offset + (rows - 1 - y) * cell_size),
                    cell_size, cell_size,
                    fill=True, color=color, alpha=alpha, linewidth=0
                ))

    ani = animation.FuncAnimation(
        fig,
        update,
        frames=len(frames),
        blit=False,
        interval=1000 / TARGET_FPS,
        repeat=False
    )
    return ani, fig


class TqdmProgressCallback:
    def __init__(self, total: int):
        self.pbar = tqdm(total=total, desc="Saving Video", unit="frame", ncols=100)

    def __call__(self, current_frame: int, total_frames: int) -> None:
        self.pbar.update(1)

    def close(self) -> None:
        self.pbar.close()


def make_writer(output_file: str) -> animation.AbstractMovieWriter:
    if output_file.lower().endswith('.gif'):
        return animation.PillowWriter(fps=TARGET_FPS)
    ffmpeg_path = shutil.which('ffmpeg')
    if not ffmpeg_path:
        print("WARNING: ffmpeg not found. Saving to a video container will likely fail.")
        print("Install ffmpeg and make sure it is on PATH, or save to a .gif instead.")
    else:
        plt.rcParams['animation.ffmpeg_path'] = ffmpeg_path
    return animation.FFMpegWriter(
        fps=TARGET_FPS,
        metadata=dict(artist='mazepath'),
        bitrate=VIDEO_BITRATE
    )


def save_animation(ani: animation.FuncAnimation, fig: plt.Figure, output_file: str, total_frames: int) -> bool:
    """Write the animation to disk; returns True when the file was saved."""
    progress_bar = TqdmProgressCallback(total_frames)
    try:
        ani.save(output_file, writer=make_writer(output_file), progress_callback=progress_bar)
        print(f"✅ Animation saved successfully to {output_file}")
        return True
    except (OSError, RuntimeError, ValueError) as e:
        print(f"❌ Error saving animation: {e}")
        return False
    finally:
        progress_bar.close()
        plt.close(fig)
