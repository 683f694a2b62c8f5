"""Main application controller connecting UI and maze domain logic."""

import logging
from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

from PySide6.QtCore import QObject, QThread, Qt, Signal

from ..domain.types import (
    AXES, Axis, Coord, Dimensions, GeneratedMaze, Grid, MazeConfig, MazeError,
    SolveResult, clamp_coord, clamp_dimension, clamp_max_dimension,
)
from ..domain.bfs import BFSSolver
from ..utils.maze_factory import generate_maze
from ..utils.rng import SeededRNG
from .fsm import MazeState, MazeStateMachine

LOGGER = logging.getLogger(__name__)

Endpoint = Literal["start", "end"]


@dataclass(frozen=True)
class MazeSnapshot:
    """
    Immutable view of the maze handed to the renderer.

    grid is a read-only copy (None once dimensions change and the maze is
    discarded). path is None while unsolved and empty when no path exists.
    """
    dimensions: Dimensions
    grid: Optional[Grid]
    start: Coord
    end: Coord
    path: Optional[Tuple[Coord, ...]]
    state: MazeState
    repaired: bool = False

    def __post_init__(self):
        if self.grid is not None and not self.grid.read_only:
            raise ValueError("MazeSnapshot grid must be a read-only copy")

    @property
    def has_maze(self) -> bool:
        return self.grid is not None

    @property
    def path_length(self) -> int:
        """Moves along the path; 0 when unsolved or unreachable."""
        return max(0, len(self.path) - 1) if self.path else 0


class MazeWorker(QObject):
    """Worker that generates or solves a maze off the UI thread."""

    finished = Signal(int, object)  # request_id, GeneratedMaze | SolveResult | None
    error_occurred = Signal(int, str)

    def __init__(self, request_id: int, kind: str, dimensions: Dimensions,
                 grid: Optional[Grid] = None, start: Optional[Coord] = None,
                 end: Optional[Coord] = None, seed: Optional[int] = None):
        super().__init__()
        self.request_id = request_id
        self.kind = kind
        self.dimensions = dimensions
        self.grid = grid
        self.start = start
        self.end = end
        self.seed = seed
        self.should_stop = False

    def stop(self):
        """Ask the worker to abandon its job."""
        self.should_stop = True

    def execute(self):
        """Do the work on the calling thread. Returns None if stopped."""
        if self.kind == "generate":
            x, y, z = self.dimensions
            return generate_maze(x, y, z, rng=SeededRNG(self.seed))

        solver = BFSSolver()
        solver.initialize(self.start, self.end, self.grid)
        while not self.should_stop:
            result = solver.step(self.grid)
            if result is not None:
                return result
        return None

    def run(self):
        try:
            payload = self.execute()
        except MazeError as e:
            self.error_occurred.emit(self.request_id, str(e))
            return
        if self.should_stop:
            payload = None
        self.finished.emit(self.request_id, payload)


class MazeController(QObject):
    """
    Controller that owns the current maze and connects UI to domain logic.

    Only the latest request matters: starting a generate or solve, or
    editing dimensions or endpoints, cancels whatever is in flight and
    results of superseded requests are dropped.

    Signals:
        snapshot_changed: Emitted with a MazeSnapshot whenever maze data changes
        state_changed: Emitted when the solve state changes
        busy_changed: Emitted when a generate/solve starts or ends
        error_occurred: Emitted when an error occurs
    """

    snapshot_changed = Signal(object)  # MazeSnapshot
    state_changed = Signal(object)  # MazeState
    busy_changed = Signal(bool)
    error_occurred = Signal(str)

    def __init__(self, config: Optional[MazeConfig] = None, use_worker_thread: bool = True,
                 generate_on_start: bool = True):
        super().__init__()

        self._config = config or MazeConfig()
        self._config.validate()
        self._use_worker_thread = use_worker_thread

        self._state_machine = MazeStateMachine()
        self._grid: Optional[Grid] = None
        x, y, z = self._config.dimensions
        self._start_coord: Coord = (0, 0, 0)
        self._end_coord: Coord = (x - 1, y - 1, z - 1)
        self._path: Optional[Tuple[Coord, ...]] = None
        self._repaired = False

        self._request_id = 0
        self._jobs: Dict[int, Tuple[QThread, MazeWorker]] = {}
        self._busy = False

        self._setup_state_callbacks()

        if generate_on_start:
            self.generate(self._config.seed)

    def _setup_state_callbacks(self):
        for state in MazeState:
            self._state_machine.on_state_enter(state, self._on_state_entered)

    # Properties

    @property
    def config(self) -> MazeConfig:
        return self._config

    @property
    def grid(self) -> Optional[Grid]:
        return self._grid

    @property
    def start_coord(self) -> Coord:
        return self._start_coord

    @property
    def end_coord(self) -> Coord:
        return self._end_coord

    @property
    def path(self) -> Optional[Tuple[Coord, ...]]:
        return self._path

    @property
    def current_state(self) -> MazeState:
        return self._state_machine.current_state

    @property
    def is_busy(self) -> bool:
        return self._busy

    def snapshot(self) -> MazeSnapshot:
        """Build an immutable snapshot of the current maze."""
        return MazeSnapshot(
            dimensions=self._config.dimensions,
            grid=self._grid.copy(read_only=True) if self._grid is not None else None,
            start=self._start_coord,
            end=self._end_coord,
            path=self._path,
            state=self._state_machine.current_state,
            repaired=self._repaired,
        )

    def get_state_description(self) -> str:
        return self._state_machine.get_state_description()

    # Maze management

    def generate(self, seed: Optional[int] = None) -> bool:
        """Generate a new maze with the configured dimensions."""
        self._config.seed = seed
        worker = MazeWorker(self._next_request(), "generate", self._config.dimensions, seed=seed)
        return self._submit(worker)

    def solve(self) -> bool:
        """Solve the current maze from the current start to end."""
        if self._grid is None:
            self.error_occurred.emit("Generate a maze before solving")
            return False

        worker = MazeWorker(
            self._next_request(), "solve", self._config.dimensions,
            grid=self._grid.copy(read_only=True),
            start=self._start_coord, end=self._end_coord,
        )
        return self._submit(worker)

    def set_dimension(self, axis: Axis, value: int) -> int:
        """
        Resize one axis, clamped to 2..max_dimension.

        The current maze no longer fits and is discarded; start and end
        are pulled back inside the new extents. Returns the applied size.
        """
        size = clamp_dimension(value, self._config.max_dimension)
        setattr(self._config, axis, size)
        dimensions = self._config.dimensions
        self._start_coord = clamp_coord(self._start_coord, dimensions)
        self._end_coord = clamp_coord(self._end_coord, dimensions)

        self._next_request()
        self._grid = None
        self._discard_solution()
        return size

    def set_max_dimension(self, value: int) -> int:
        """Set the upper bound for axis sizes, clamped to 10..100."""
        self._config.max_dimension = clamp_max_dimension(value)
        for axis in AXES:
            if getattr(self._config, axis) > self._config.max_dimension:
                self.set_dimension(axis, self._config.max_dimension)
        return self._config.max_dimension

    def set_point(self, which: Endpoint, axis: Axis, value: int) -> int:
        """Move start or end along one axis, clamped in-bounds. Returns the applied value."""
        index = AXES.index(axis)
        current = list(self._start_coord if which == "start" else self._end_coord)
        current[index] = value
        coord = clamp_coord(tuple(current), self._config.dimensions)
        if which == "start":
            self._start_coord = coord
        else:
            self._end_coord = coord

        self._next_request()
        self._discard_solution()
        return coord[index]

    # Request handling

    def _next_request(self) -> int:
        """Supersede any in-flight request and return a fresh id."""
        for _, worker in self._jobs.values():
            worker.stop()
        self._request_id += 1
        return self._request_id

    def _submit(self, worker: MazeWorker) -> bool:
        if not self._use_worker_thread:
            try:
                payload = worker.execute()
            except MazeError as e:
                self.error_occurred.emit(f"Failed to {worker.kind} maze: {e}")
                return False
            self._on_worker_finished(worker.request_id, payload)
            return True

        thread = QThread()
        thread.setObjectName(f"Maze-{worker.kind}-{worker.request_id}")
        worker.moveToThread(thread)

        worker.finished.connect(self._on_worker_finished)
        worker.error_occurred.connect(self._on_worker_error)
        # Direct so the thread can exit while the main thread blocks in shutdown()
        worker.finished.connect(thread.quit, Qt.DirectConnection)
        worker.error_occurred.connect(thread.quit, Qt.DirectConnection)
        thread.started.connect(worker.run)
        request_id = worker.request_id
        thread.finished.connect(lambda: self._release_job(request_id))

        self._jobs[request_id] = (thread, worker)
        self._set_busy(True)
        thread.start()
        return True

    def _release_job(self, request_id: int):
        job = self._jobs.pop(request_id, None)
        if job is None:
            return
        thread, worker = job
        worker.deleteLater()
        thread.deleteLater()
        self._set_busy(self._request_id in self._jobs)

    def _set_busy(self, busy: bool):
        if busy != self._busy:
            self._busy = busy
            self.busy_changed.emit(busy)

    def shutdown(self, timeout_ms: int = 2000):
        """Stop and join any running workers."""
        for request_id, (thread, worker) in list(self._jobs.items()):
            worker.stop()
            thread.quit()
            if thread.wait(timeout_ms):
                del self._jobs[request_id]
            else:
                # Destroying a running QThread aborts the process
                LOGGER.warning("Worker thread %s did not stop in time", thread.objectName())
        self._set_busy(bool(self._jobs))

    def _on_worker_error(self, request_id: int, message: str):
        if request_id != self._request_id:
            return
        self.error_occurred.emit(message)

    def _on_worker_finished(self, request_id: int, payload):
        if request_id != self._request_id or payload is None:
            LOGGER.debug("Dropping result of superseded request %d", request_id)
            return
        if isinstance(payload, GeneratedMaze):
            self._apply_generated(payload)
        elif isinstance(payload, SolveResult):
            self._apply_solution(payload)

    def _apply_generated(self, maze: GeneratedMaze):
        self._grid = maze.grid
        self._start_coord = maze.start
        self._end_coord = maze.end
        self._repaired = maze.repaired
        self._path = tuple(maze.path)
        self._state_machine.reset()
        if maze.repaired:
            self._state_machine.mark_unsolvable()
            self._state_machine.mark_repaired()
        else:
            self._state_machine.mark_solved()
        self.snapshot_changed.emit(self.snapshot())

    def _apply_solution(self, result: SolveResult):
        self._state_machine.reset()
        self._path = tuple(result.path)
        if result.found:
            self._state_machine.mark_solved({"result": result})
        else:
            self._state_machine.mark_unsolvable({"result": result})
        self.snapshot_changed.emit(self.snapshot())

    def _discard_solution(self):
        self._path = None
        self._repaired = False
        self._state_machine.reset()
        self.snapshot_changed.emit(self.snapshot())

    # State Machine Callbacks

    def _on_state_entered(self, context):
        self.state_changed.emit(self._state_machine.current_state)
