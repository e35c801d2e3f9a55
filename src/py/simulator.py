import argparse
import os
import sys
from typing import Dict, List, Optional, Tuple

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), ".")))

from data_types import Pose, parse_direction
from grid_map import GridMap
from map_loader import load_grid_from_txt
from robot import Robot
from sweep_io import export_trajectory, load_cases, run_output, write_run_output
from utils import render_path


def run_case(grid_map: GridMap, start: Optional[Pose] = None, verbose: bool = False, map_path: str = "") -> Dict:
    robot = Robot(grid_map, start=start, verbose=verbose)
    robot.run()
    return run_output(robot, map_path=map_path)


def run_cases(cases: List[Dict], verbose: bool = False) -> List[Tuple[str, Optional[int], int]]:
    maps: Dict[Tuple[str, ...], GridMap] = {}
    results = []
    for case in cases:
        key = tuple(case["grid"])
        if key not in maps:
            maps[key] = GridMap(case["grid"])
        robot = Robot(maps[key], start=case["start"], verbose=verbose)
        got = robot.run()
        results.append((case["name"], case["expected"], got))
    return results


def _run_fixture_file(path: str, verbose: bool) -> bool:
    results = run_cases(load_cases(path), verbose=verbose)
    ok = True
    for i, (name, expected, got) in enumerate(results):
        if expected is None:
            print(f"test [{i}] {name}: cleaned={got}")
        elif got != expected:
            ok = False
            print(f"test [{i}] {name}: FAIL. exp: {expected}, got: {got}")
        else:
            print(f"test [{i}] {name}: OK")
    return ok


def run_simulation(
    map_path: str,
    start: Pose,
    output_path: str,
    trajectory_path: Optional[str] = None,
    render: bool = False,
    verbose: bool = False,
) -> Dict:
    grid_map = GridMap(load_grid_from_txt(map_path))
    print(f"[sweep] grid: {grid_map.width}x{grid_map.height}")
    robot = Robot(grid_map, start=start, verbose=verbose)
    cleaned = robot.run()
    output = run_output(robot, map_path=map_path)
    print(
        f"[sweep] cleaned={cleaned} distinct={output['distinct']} "
        f"reachable={output['reachable']} stop={output['stop_reason']} steps={output['steps']}"
    )
    if render:
        for line in render_path(grid_map, robot.trail):
            print(line)

    write_run_output(output, output_path)
    print(f"[sweep] output written to: {output_path}")
    if trajectory_path:
        export_trajectory(robot.history, trajectory_path, continuous=True)
        print(f"[sweep] trajectory written to: {trajectory_path}")
    return output


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the cleaning robot sweep on a grid")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--map", help="Path to grid text file ('.' open, anything else blocked)")
    source.add_argument("--cases", help="Path to JSON fixture file with expected counts")
    parser.add_argument("--start", type=int, nargs=2, default=[0, 0], metavar=("X", "Y"), help="Start cell")
    parser.add_argument("--heading", default="R", help="Start heading: R, D, L or U (default: R)")
    parser.add_argument("--output", default="sweep_output.json", help="Output JSON path")
    parser.add_argument("--trajectory", default=None, help="Optional trajectory export path")
    parser.add_argument("--render", action="store_true", help="Print the path over the grid")
    parser.add_argument("--verbose", action="store_true", help="Print every robot transition")
    args = parser.parse_args()

    if args.cases:
        if not _run_fixture_file(args.cases, args.verbose):
            sys.exit(1)
        return

    start = Pose((args.start[0], args.start[1]), parse_direction(args.heading))
    run_simulation(
        args.map,
        start,
        args.output,
        trajectory_path=args.trajectory,
        render=args.render,
        verbose=args.verbose,
    )


if __name__ == "__main__":
    main()
