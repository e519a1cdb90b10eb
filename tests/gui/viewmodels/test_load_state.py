"""Tests for the Idle/Loading state machine."""

from iconpicker.gui.viewmodels.load_state import LoadState, LoadStateMachine


class TestLoadStateMachine:
    def test_starts_idle(self):
        machine = LoadStateMachine()
        assert machine.state is LoadState.IDLE
        assert machine.is_loading is False

    def test_begin_then_finish(self):
        machine = LoadStateMachine()
        transitions = []
        machine.state_changed.connect(lambda new, old: transitions.append((old, new)))

        assert machine.begin() is True
        assert machine.is_loading is True
        assert machine.finish() is True
        assert machine.state is LoadState.IDLE

        assert transitions == [
            (LoadState.IDLE, LoadState.LOADING),
            (LoadState.LOADING, LoadState.IDLE),
        ]

    def test_begin_while_loading_is_self_loop(self):
        machine = LoadStateMachine()
        machine.begin()
        transitions = []
        machine.state_changed.connect(lambda new, old: transitions.append(new))

        assert machine.begin() is False
        assert machine.state is LoadState.LOADING
        assert transitions == []

    def test_finish_while_idle_ignored(self):
        machine = LoadStateMachine()
        assert machine.finish() is False
        assert machine.state is LoadState.IDLE
