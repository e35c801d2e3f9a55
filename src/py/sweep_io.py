"""Readers for sweep case fixtures and writers for run output / trajectories."""

import json
from typing import Dict, List, Sequence

from data_types import DIR_NAMES, Pose, Position, Stopped, parse_direction
from grid_map import OPEN_CHAR, GridMap
from robot import Robot
from utils import distinct_count, reachable_cells


def load_cases(path: str) -> List[Dict]:
    """Parse a JSON fixture file into a list of sweep cases.

    Format:
        [
          {"name": "corridor", "grid": ["....x", "x...."],
           "start": [0, 0], "heading": "R", "expected": 7},
          ...
        ]

    ``start`` defaults to [0, 0], ``heading`` to "R" and ``expected`` to None.
    Headings are returned as direction constants.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    cases: List[Dict] = []
    for idx, entry in enumerate(raw):
        grid = entry.get("grid")
        if not grid:
            raise ValueError(f"Case {idx} is missing its grid")
        x, y = entry.get("start", [0, 0])
        cases.append(
            {
                "name": entry.get("name", f"case_{idx}"),
                "grid": list(grid),
                "start": Pose((int(x), int(y)), parse_direction(entry.get("heading", "R"))),
                "expected": entry.get("expected"),
            }
        )
    return cases


def run_output(robot: Robot, map_path: str = "") -> Dict:
    grid_map = robot.grid_map
    state = robot.state
    reason = state.reason if isinstance(state, Stopped) else None
    sx, sy = robot.start.pos
    return {
        "map": map_path,
        "grid": list(grid_map.rows),
        "open_char": grid_map.open_char,
        "start": {"pos": [sx, sy], "heading": DIR_NAMES[robot.start.facing]},
        "cleaned": len(robot.history),
        "distinct": distinct_count(robot.history),
        "reachable": len(reachable_cells(grid_map, [robot.start.pos])),
        "stop_reason": reason,
        "steps": robot.steps,
        "trajectory": [[x, y] for x, y in robot.history],
        "poses": [[p.pos[0], p.pos[1], p.facing] for p in robot.trail],
    }


def write_run_output(output: Dict, output_path: str) -> None:
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(output, f, indent=2)


def load_run_output(path: str) -> Dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_run_grid(output: Dict) -> GridMap:
    return GridMap(output["grid"], open_char=output.get("open_char", OPEN_CHAR))


def export_trajectory(
    history: Sequence[Position],
    output_path: str,
    continuous: bool = True,
) -> None:
    """Export the move history as a single path line.

    Continuous (default):
        Robot:(x0,y0,0)->(x1,y1,1)->(x2,y2,2)->

    Discrete (no time):
        Robot:(x0,y0)->(x1,y1)->(x2,y2)->
    """
    if continuous:
        parts = [f"({x},{y},{t})" for t, (x, y) in enumerate(history)]
    else:
        parts = [f"({x},{y})" for x, y in history]
    line = "Robot:" + "->".join(parts) + "->"

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(line + "\n")
