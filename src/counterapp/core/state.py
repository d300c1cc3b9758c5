"""Counter state model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr, StrictInt

from .notifier import ChangeNotifier


class CounterState(BaseModel):
    """The single integer the application manages."""
    model_config = ConfigDict(validate_assignment=True)

    count: StrictInt = 0

    _notifier: ChangeNotifier = PrivateAttr(default_factory=ChangeNotifier)

    def __init__(self, notifier: Optional[ChangeNotifier] = None, **data):
        super().__init__(**data)
        if notifier is not None:
            self._notifier = notifier

    @property
    def notifier(self) -> ChangeNotifier:
        return self._notifier

    def get(self) -> int:
        return self.count

    def set(self, value: int) -> bool:
        """
        Store a new count and notify listeners of "count".

        Setting the current value is a no-op and sends no notification.
        Anything but a plain int is rejected by validation, even when it
        compares equal to the current count.

        Returns:
            True if the value changed
        """
        if type(value) is int and value == self.count:
            return False
        self.count = value
        self._notifier.notify("count")
        return True
