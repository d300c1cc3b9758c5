"""
Counter View-Model

Binds the counter state to a presentation layer. The view-model owns the
state, the change notifier and the increment command; the presentation layer
reads `count`, binds a control to `increment_command`, and subscribes to be
told when to re-read.
"""

import json
from typing import Any, Dict

from fastcore.xml import Div

from .commands import IncrementCommand
from .notifier import ChangeNotifier, Listener, Subscription
from .signals import SignalDescriptor
from .state import CounterState


class CounterViewModel:
    """
    View-model exposing a bindable count and an increment command.

    Subclasses may set `namespace` to bind several counters on one page.

    Example:
        ```python
        vm = CounterViewModel()
        vm.subscribe(lambda name: print(name, vm.count))
        vm.increment_command.execute()      # prints "count 1"
        CounterViewModel.Scount             # "$Counter.count"
        ```
    """

    namespace: str = "Counter"

    Scount = SignalDescriptor("count")

    def __init__(self, initial_count: int = 0):
        self.notifier = ChangeNotifier()
        self.state = CounterState(notifier=self.notifier, count=initial_count)
        self.increment_command = IncrementCommand(self.state)

    @property
    def count(self) -> int:
        return self.state.get()

    @count.setter
    def count(self, value: int) -> None:
        self.state.set(value)

    def subscribe(self, listener: Listener) -> Subscription:
        return self.notifier.subscribe(listener)

    def unsubscribe(self, subscription: Subscription) -> None:
        self.notifier.unsubscribe(subscription)

    @property
    def signals(self) -> Dict[str, Any]:
        """Get the Datastar signals for this view-model."""
        return {self.namespace: self.state.model_dump()}

    def __ft__(self):
        """Render with data-signals attributes."""
        return Div({"data-signals": json.dumps(self.signals)}, id=self.namespace)

    def __repr__(self):
        return f"{self.__class__.__name__}(count={self.count})"
