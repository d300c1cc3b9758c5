"""
counterapp core

Framework-agnostic view-model layer: state, change notification, commands
and binding paths.
"""

from .notifier import ChangeNotifier, Subscription
from .state import CounterState
from .commands import RelayCommand, IncrementCommand, CommandConfigurationError
from .signals import SignalDescriptor
from .viewmodel import CounterViewModel

__all__ = [
    "ChangeNotifier",
    "Subscription",
    "CounterState",
    "RelayCommand",
    "IncrementCommand",
    "CommandConfigurationError",
    "SignalDescriptor",
    "CounterViewModel",
]
