"""Cleaning robot that sweeps a GridMap with a right-hand turn rule."""

from typing import List, Optional, Set, Union

from data_types import (
    DIR_EAST,
    DIR_NAMES,
    DIR_TO_DELTA,
    NUM_DIRECTIONS,
    STOP_BOXED_IN,
    STOP_REVISIT,
    Blocked,
    Empty,
    Pose,
    Position,
    Running,
    Stopped,
    Visited,
)
from grid_map import CellStatus, GridMap, classify

RunState = Union[Running, Stopped]


class Robot:
    """Moves through the map cleaning cells until it cannot make progress.

    The loop peeks one cell ahead of the current pose:
      * Empty: move there and record it in the history.
      * Visited: step onto it once to probe past it; a second visited cell in
        a row stops the robot.
      * Blocked: turn right in place; four turns without a move stop the robot.

    ``run()`` returns the length of the move history, which includes the start
    cell.
    """

    def __init__(self, grid_map: GridMap, start: Optional[Pose] = None, verbose: bool = False):
        if start is None:
            start = Pose((0, 0), DIR_EAST)
        if start.facing not in DIR_TO_DELTA:
            raise ValueError(f"Unknown heading: {start.facing}")
        if not grid_map.open_at(start.pos):
            raise ValueError(f"Start position is not an open cell: {start.pos}")
        self.grid_map = grid_map
        self.start = start
        self.verbose = verbose
        self.state: RunState = Running(start)
        self.history: List[Position] = [start.pos]
        self.trail: List[Pose] = [start]
        self.steps = 0
        self._visited: Set[Position] = {start.pos}
        self._just_visited = False
        self._nblocked = 0

    @property
    def pose(self) -> Pose:
        return self.state.pose

    @property
    def stopped(self) -> bool:
        return isinstance(self.state, Stopped)

    def peek(self) -> CellStatus:
        return classify(self.grid_map, self.pose.advance().pos, self._visited)

    def step(self) -> RunState:
        if self.stopped:
            raise RuntimeError("Robot has already stopped")
        pose = self.pose
        cell = self.peek()
        self.steps += 1

        if isinstance(cell, Empty):
            self._nblocked = 0
            self._just_visited = False
            self._move(Pose(cell.pos, pose.facing))
            self.history.append(cell.pos)
            self._visited.add(cell.pos)
        elif isinstance(cell, Visited):
            self._nblocked = 0
            if self._just_visited:
                self.state = Stopped(pose, STOP_REVISIT)
            else:
                # step onto the cleaned cell and peek again from there
                self._just_visited = True
                self._move(Pose(cell.pos, pose.facing))
        else:
            self._nblocked += 1
            if self._nblocked == NUM_DIRECTIONS:
                self.state = Stopped(pose, STOP_BOXED_IN)
            else:
                self._move(pose.rotate())

        if self.verbose:
            print(f"[robot] step={self.steps} {_describe(cell)} -> {_describe_state(self.state)}")
        return self.state

    def run(self) -> int:
        while not self.stopped:
            self.step()
        return len(self.history)

    def _move(self, pose: Pose) -> None:
        self.state = Running(pose)
        self.trail.append(pose)


def _describe(cell: CellStatus) -> str:
    if isinstance(cell, Blocked):
        return "blocked"
    kind = "empty" if isinstance(cell, Empty) else "visited"
    return f"{kind}{cell.pos}"


def _describe_state(state: RunState) -> str:
    x, y = state.pose.pos
    heading = DIR_NAMES[state.pose.facing]
    if isinstance(state, Stopped):
        return f"stopped({state.reason}) at ({x},{y},{heading})"
    return f"({x},{y},{heading})"
