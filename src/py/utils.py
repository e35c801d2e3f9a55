from collections import deque
from typing import Dict, Iterable, List, Sequence, Set

from data_types import DIR_EAST, DIR_NORTH, DIR_SOUTH, DIR_TO_DELTA, DIR_WEST, Pose, Position
from grid_map import GridMap

GLYPHS = {
    DIR_EAST: ">",
    DIR_SOUTH: "v",
    DIR_WEST: "<",
    DIR_NORTH: "^",
}


def validate_history(history: Sequence[Position], grid_map: GridMap) -> bool:
    if not history:
        return False
    seen = set()
    for t, pos in enumerate(history):
        if not grid_map.open_at(pos):
            return False
        if pos in seen:
            return False
        seen.add(pos)
        if t == 0:
            continue
        x0, y0 = history[t - 1]
        x1, y1 = pos
        # one visited probe may sit between two recorded moves
        if abs(x0 - x1) + abs(y0 - y1) not in (1, 2):
            return False
    return True


def distinct_count(history: Iterable[Position]) -> int:
    return len(set(history))


def reachable_cells(grid_map: GridMap, sources: Iterable[Position]) -> Set[Position]:
    reached: Set[Position] = set()
    q = deque()
    for pos in sources:
        if not grid_map.in_bounds(pos):
            raise ValueError(f"Source out of bounds: {pos}")
        if not grid_map.open_at(pos):
            raise ValueError(f"Source on blocked cell: {pos}")
        if pos in reached:
            continue
        reached.add(pos)
        q.append(pos)
    while q:
        x, y = q.popleft()
        for dx, dy in DIR_TO_DELTA.values():
            nb = (x + dx, y + dy)
            if nb in reached or not grid_map.open_at(nb):
                continue
            reached.add(nb)
            q.append(nb)
    return reached


def render_path(grid_map: GridMap, trail: Sequence[Pose]) -> List[str]:
    """Overlay the robot's trail on the grid, one heading glyph per cell.

    Each cell shows the heading the robot last had while standing on it.
    """
    last: Dict[Position, int] = {}
    for pose in trail:
        last[pose.pos] = pose.facing
    lines = []
    for y, row in enumerate(grid_map.rows):
        chars = list(row)
        for x in range(grid_map.width):
            if (x, y) in last:
                chars[x] = GLYPHS[last[(x, y)]]
        lines.append("".join(chars))
    return lines
