"""Tests for CounterState get/set semantics."""

import pytest
from pydantic import ValidationError

from counterapp.core import ChangeNotifier, CounterState


def test_defaults_to_zero():
    assert CounterState().get() == 0


@pytest.mark.parametrize("value", [0, 1, -1, 42, -(2 ** 63), 2 ** 62])
def test_set_then_get_returns_value(value):
    state = CounterState(count=7)
    state.set(value)
    assert state.get() == value


def test_set_to_different_value_notifies_once(recorder):
    notifier = ChangeNotifier()
    notifier.subscribe(recorder)
    state = CounterState(notifier=notifier)

    assert state.set(5) is True
    assert recorder.names == ["count"]


def test_set_to_same_value_does_not_notify(recorder):
    notifier = ChangeNotifier()
    notifier.subscribe(recorder)
    state = CounterState(notifier=notifier, count=3)

    assert state.set(3) is False
    assert recorder.names == []


def test_builds_its_own_notifier_when_none_given(recorder):
    state = CounterState()
    state.notifier.subscribe(recorder)
    state.set(1)
    assert recorder.names == ["count"]


@pytest.mark.parametrize("value", ["not a number", "5", "0", 2.0, 0.0])
def test_rejects_non_integer_values(value, recorder):
    state = CounterState()
    state.notifier.subscribe(recorder)
    with pytest.raises(ValidationError):
        state.set(value)
    assert state.get() == 0
    assert type(state.get()) is int
    assert recorder.names == []


def test_equal_float_is_rejected_not_ignored():
    state = CounterState(count=2)
    with pytest.raises(ValidationError):
        state.set(2.0)
    assert state.get() == 2


def test_constructor_rejects_non_integer_count():
    with pytest.raises(ValidationError):
        CounterState(count="3")


def test_listener_exception_propagates_out_of_set():
    state = CounterState()

    def failing(name):
        raise RuntimeError("listener failed")

    state.notifier.subscribe(failing)
    with pytest.raises(RuntimeError):
        state.set(4)
    assert state.get() == 4
