"""
Commands

Bindable actions for the presentation layer. A command pairs an action with
a predicate saying whether the action is currently available, so a bound
control can enable or disable itself.
"""

import logging
from typing import Any, Callable, Optional

from .notifier import ChangeNotifier
from .state import CounterState

logger = logging.getLogger(__name__)


class CommandConfigurationError(ValueError):
    """Raised when a command is built without an action to execute."""


class RelayCommand:
    """
    Command that relays to an action and an optional availability predicate.

    Args:
        execute: Callable invoked with the command parameter
        can_execute: Optional predicate over the command parameter. Without
                     one the command is always available.

    Raises:
        CommandConfigurationError: If execute is missing or not callable
    """

    def __init__(self, execute: Callable[[Any], Any], can_execute: Optional[Callable[[Any], bool]] = None):
        if execute is None or not callable(execute):
            raise CommandConfigurationError("execute must be a callable")
        self._execute = execute
        self._can_execute = can_execute
        self.can_execute_changed = ChangeNotifier()

    def can_execute(self, parameter: Any = None) -> bool:
        return self._can_execute is None or bool(self._can_execute(parameter))

    def execute(self, parameter: Any = None) -> None:
        logger.debug(f"Executing {self.__class__.__name__}")
        self._execute(parameter)

    def raise_can_execute_changed(self) -> None:
        """Tell bound controls to re-query can_execute."""
        self.can_execute_changed.notify("can_execute")

    def __call__(self, parameter: Any = None) -> None:
        self.execute(parameter)


class IncrementCommand(RelayCommand):
    """Adds one to a CounterState. Always available."""

    def __init__(self, state: CounterState):
        self.state = state
        super().__init__(self._increment)

    def _increment(self, _parameter: Any) -> None:
        self.state.set(self.state.get() + 1)
