"""Maze lifecycle state machine."""
from maze3d.app.fsm import MazeState, MazeStateMachine


def test_starts_unsolved():
    fsm = MazeStateMachine()
    assert fsm.current_state == MazeState.UNSOLVED
    assert not fsm.is_terminal()


def test_solved_cycle():
    fsm = MazeStateMachine()
    assert fsm.mark_solved()
    assert fsm.current_state == MazeState.SOLVED
    assert fsm.is_terminal()


def test_unsolvable_then_repaired_then_unsolved():
    fsm = MazeStateMachine()
    assert fsm.mark_unsolvable()
    assert not fsm.is_terminal()
    assert fsm.mark_repaired()
    assert fsm.is_terminal()
    assert fsm.transition_to(MazeState.UNSOLVED)
    assert fsm.mark_solved()


def test_invalid_transitions_are_refused():
    fsm = MazeStateMachine()
    assert not fsm.mark_repaired()
    assert fsm.current_state == MazeState.UNSOLVED
    fsm.mark_solved()
    assert not fsm.mark_unsolvable()
    assert fsm.current_state == MazeState.SOLVED


def test_state_callbacks_fire_on_entry():
    fsm = MazeStateMachine()
    entered = []
    for state in MazeState:
        fsm.on_state_enter(state, lambda context, s=state: entered.append((s, context)))
    fsm.mark_unsolvable({"why": "walled"})
    fsm.mark_repaired()
    fsm.reset()
    assert entered == [
        (MazeState.UNSOLVABLE, {"why": "walled"}),
        (MazeState.REPAIRED, None),
        (MazeState.UNSOLVED, None),
    ]


def test_reset_from_unsolved_does_not_fire():
    fsm = MazeStateMachine()
    entered = []
    fsm.on_state_enter(MazeState.UNSOLVED, entered.append)
    fsm.reset()
    assert entered == []
    assert fsm.get_state_description() == "Not solved yet"
