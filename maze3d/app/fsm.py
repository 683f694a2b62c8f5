"""Finite State Machine for the maze solve lifecycle."""

from enum import Enum
from typing import Callable, Optional, Set


class MazeState(Enum):
    """Solve states of the current maze."""
    UNSOLVED = "unsolved"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    REPAIRED = "repaired"


class MazeStateMachine:
    """
    Finite State Machine tracking where the current maze stands.

    State Transitions:
    UNSOLVED -> SOLVED (when a solve finds a path)
    UNSOLVED -> UNSOLVABLE (when a solve reports no path)
    UNSOLVABLE -> REPAIRED (when generation carves a corridor)
    UNSOLVABLE -> UNSOLVED (when start/end are edited)
    REPAIRED -> UNSOLVED (when the repaired grid is ready to be solved again)
    SOLVED -> UNSOLVED (when the grid or endpoints change)

    SOLVED and REPAIRED end a generation cycle.
    """

    def __init__(self):
        self._current_state = MazeState.UNSOLVED
        self._state_callbacks = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> dict[MazeState, Set[MazeState]]:
        """Build the valid state transition map."""
        return {
            MazeState.UNSOLVED: {MazeState.SOLVED, MazeState.UNSOLVABLE},
            MazeState.SOLVED: {MazeState.UNSOLVED},
            MazeState.UNSOLVABLE: {MazeState.REPAIRED, MazeState.UNSOLVED},
            MazeState.REPAIRED: {MazeState.UNSOLVED},
        }

    @property
    def current_state(self) -> MazeState:
        """Get the current state."""
        return self._current_state

    def can_transition_to(self, target_state: MazeState) -> bool:
        """Check if transition to target state is valid."""
        return target_state in self._valid_transitions.get(self._current_state, set())

    def transition_to(self, target_state: MazeState, context: dict = None) -> bool:
        """
        Attempt to transition to the target state.

        Returns:
            True if transition was successful, False otherwise
        """
        if not self.can_transition_to(target_state):
            return False

        self._current_state = target_state
        if target_state in self._state_callbacks:
            self._state_callbacks[target_state](context)
        return True

    def on_state_enter(self, state: MazeState, callback: Callable[[Optional[dict]], None]):
        """Register a callback for when entering a specific state."""
        self._state_callbacks[state] = callback

    def reset(self, context: dict = None):
        """Return to UNSOLVED from any state, e.g. after regeneration."""
        changed = self._current_state != MazeState.UNSOLVED
        self._current_state = MazeState.UNSOLVED
        if changed and MazeState.UNSOLVED in self._state_callbacks:
            self._state_callbacks[MazeState.UNSOLVED](context)

    def is_terminal(self) -> bool:
        """Check if the generation cycle has ended."""
        return self._current_state in (MazeState.SOLVED, MazeState.REPAIRED)

    def mark_solved(self, context: dict = None) -> bool:
        return self.transition_to(MazeState.SOLVED, context)

    def mark_unsolvable(self, context: dict = None) -> bool:
        return self.transition_to(MazeState.UNSOLVABLE, context)

    def mark_repaired(self, context: dict = None) -> bool:
        return self.transition_to(MazeState.REPAIRED, context)

    def get_state_description(self) -> str:
        """Get a human-readable description of the current state."""
        descriptions = {
            MazeState.UNSOLVED: "Not solved yet",
            MazeState.SOLVED: "Path found",
            MazeState.UNSOLVABLE: "No solution exists",
            MazeState.REPAIRED: "Repaired - solve to show a path",
        }
        return descriptions.get(self._current_state, "Unknown state")
