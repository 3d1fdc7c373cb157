import pytest

from quickadd.input_mode import TRANSITIONS, InputMode, InputModeMachine
from quickadd.utils.errors import InvalidTransitionError


def test_starts_collapsed() -> None:
    machine = InputModeMachine()
    assert machine.mode is InputMode.COLLAPSED
    assert machine.history == (InputMode.COLLAPSED,)
    assert not machine.is_busy


def test_voice_flow() -> None:
    machine = InputModeMachine()
    for target in (
        InputMode.FOCUSED,
        InputMode.RECORDING,
        InputMode.TRANSCRIBING,
        InputMode.FOCUSED,
    ):
        assert machine.transition(target) is target
    assert machine.history == (
        InputMode.COLLAPSED,
        InputMode.FOCUSED,
        InputMode.RECORDING,
        InputMode.TRANSCRIBING,
        InputMode.FOCUSED,
    )


def test_invalid_transition_raises() -> None:
    machine = InputModeMachine()
    with pytest.raises(InvalidTransitionError) as excinfo:
        machine.transition(InputMode.TRANSCRIBING)
    assert excinfo.value.source is InputMode.COLLAPSED
    assert excinfo.value.target is InputMode.TRANSCRIBING
    assert machine.mode is InputMode.COLLAPSED


def test_same_mode_is_noop() -> None:
    machine = InputModeMachine(InputMode.FOCUSED)
    machine.transition(InputMode.FOCUSED)
    assert machine.history == (InputMode.FOCUSED,)
    assert machine.can_transition(InputMode.FOCUSED)


def test_busy_modes() -> None:
    machine = InputModeMachine(InputMode.FOCUSED)
    machine.transition(InputMode.AI_PROCESSING)
    assert machine.is_busy
    assert not machine.can_transition(InputMode.RECORDING)


def test_reset() -> None:
    machine = InputModeMachine(InputMode.EXPANDED)
    machine.transition(InputMode.DATE_PICKER)
    machine.reset()
    assert machine.mode is InputMode.COLLAPSED
    assert machine.history == (InputMode.COLLAPSED,)


def test_every_mode_has_a_way_back_to_focused() -> None:
    assert set(TRANSITIONS) == set(InputMode)
    for mode, targets in TRANSITIONS.items():
        assert mode not in targets
        if mode is not InputMode.COLLAPSED:
            assert InputMode.FOCUSED in targets or mode is InputMode.FOCUSED
