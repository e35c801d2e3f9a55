"""Generate a GIF animation from sweep output JSON."""
import argparse
import io
import os
import sys
from typing import List, Sequence, Set, Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from PIL import Image

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), ".")))

from data_types import DIR_EAST, DIR_NORTH, DIR_SOUTH, DIR_WEST
from grid_map import OPEN_CHAR
from sweep_io import load_run_output

# Direction arrows (dx, dy in screen coords where y points down)
DIR_ARROW = {
    DIR_EAST: (0.3, 0),
    DIR_WEST: (-0.3, 0),
    DIR_SOUTH: (0, 0.3),
    DIR_NORTH: (0, -0.3),
}

ROBOT_COLOR = "#4363d8"
CLEANED_COLOR = "#a5d6a7"


def render_frame(
    grid: Sequence[str],
    cleaned: Set[Tuple[int, int]],
    pose: Tuple[int, int, int],
    frame_idx: int,
    title: str,
    cell_size: float = 0.5,
    status_text: str = "",
    open_char: str = OPEN_CHAR,
) -> Image.Image:
    height = len(grid)
    width = len(grid[0]) if height > 0 else 0

    fig_w = width * cell_size + 1.0
    fig_h = height * cell_size + 1.5
    fig, ax = plt.subplots(figsize=(fig_w, fig_h))
    ax.set_xlim(-0.5, width - 0.5)
    ax.set_ylim(height - 0.5, -0.5)
    ax.set_aspect("equal")
    ax.set_title(f"{title}  t={frame_idx}", fontsize=10, fontweight="bold")
    ax.tick_params(left=False, bottom=False, labelleft=False, labelbottom=False)

    # Draw grid
    for y in range(height):
        for x in range(width):
            if grid[y][x] != open_char:
                ax.add_patch(plt.Rectangle((x - 0.5, y - 0.5), 1, 1, color="#333333"))
            elif (x, y) in cleaned:
                ax.add_patch(plt.Rectangle((x - 0.5, y - 0.5), 1, 1, color=CLEANED_COLOR, ec="#ddd", lw=0.3))
            else:
                ax.add_patch(plt.Rectangle((x - 0.5, y - 0.5), 1, 1, color="#f5f5f5", ec="#ddd", lw=0.3))

    # Draw robot
    px, py, facing = pose
    circle = plt.Circle((px, py), 0.35, color=ROBOT_COLOR, ec="black", lw=1.0, zorder=3)
    ax.add_patch(circle)
    if facing in DIR_ARROW:
        dx, dy = DIR_ARROW[facing]
        ax.annotate(
            "",
            xy=(px + dx, py + dy),
            xytext=(px, py),
            arrowprops=dict(arrowstyle="->", color="white", lw=1.5),
            zorder=5,
        )

    if status_text:
        fig.text(0.05, 0.01, status_text, fontsize=8, color="#555555", va="bottom")

    plt.tight_layout()
    fig.subplots_adjust(bottom=0.08 if status_text else 0.05)

    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=100, bbox_inches="tight")
    plt.close(fig)
    buf.seek(0)
    return Image.open(buf).copy()


def sample_frames(count: int, max_frames: int) -> List[int]:
    if max_frames < 1:
        raise ValueError(f"max_frames must be at least 1, got {max_frames}")
    if count > max_frames:
        step = max(1, count // max_frames)
        frame_indices = list(range(0, count, step))
        if frame_indices[-1] != count - 1:
            frame_indices.append(count - 1)
        return frame_indices
    return list(range(count))


def make_gif(
    output_json: str,
    gif_path: str,
    max_frames: int = 60,
    frame_duration: int = 300,
    title: str = "",
    verbose: bool = False,
) -> int:
    run = load_run_output(output_json)
    grid = run["grid"]
    poses = [tuple(p) for p in run["poses"]]
    open_char = run.get("open_char", OPEN_CHAR)

    height = len(grid)
    width = len(grid[0]) if height > 0 else 0
    cell_size = 0.5 if width <= 20 else 0.25

    frames = []
    frame_indices = sample_frames(len(poses), max_frames)
    for t_idx in frame_indices:
        cleaned = {(x, y) for x, y, _ in poses[: t_idx + 1]}
        status = f"Cleaned: {len(cleaned)}"
        if t_idx == len(poses) - 1 and run.get("stop_reason"):
            status += f" | stopped: {run['stop_reason']}"
        frames.append(render_frame(grid, cleaned, poses[t_idx], t_idx, title, cell_size, status, open_char))
        if verbose and len(frames) % 10 == 0:
            print(f"  rendered {len(frames)}/{len(frame_indices)} frames")

    if not frames:
        print("No frames to render!")
        return 0

    frames[0].save(
        gif_path,
        save_all=True,
        append_images=frames[1:],
        duration=frame_duration,
        loop=0,
    )
    print(f"Saved {len(frames)} frames to {gif_path}")
    return len(frames)


def main():
    parser = argparse.ArgumentParser(description="Generate GIF from sweep output")
    parser.add_argument("--sim", required=True, help="Path to sweep output JSON")
    parser.add_argument("--output", required=True, help="Output GIF path")
    parser.add_argument("--max_frames", type=int, default=60, help="Max frames in GIF")
    parser.add_argument("--duration", type=int, default=300, help="Frame duration in ms")
    parser.add_argument("--title", default="", help="Title for the animation")
    parser.add_argument("--verbose", action="store_true", help="Print render progress")
    args = parser.parse_args()
    make_gif(args.sim, args.output, args.max_frames, args.duration, args.title, args.verbose)


if __name__ == "__main__":
    main()
