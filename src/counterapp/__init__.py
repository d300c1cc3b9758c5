"""
counterapp - Reactive Counter View-Model for FastHTML

A view-model exposing an integer count, change notifications and an
increment command, bound to a FastHTML page through Datastar signals.
"""

from .core import (
    ChangeNotifier,
    Subscription,
    CounterState,
    RelayCommand,
    IncrementCommand,
    CommandConfigurationError,
    SignalDescriptor,
    CounterViewModel,
)
from .config import ApplicationConfig, Environment, configure_logging, get_config, set_config

__version__ = "0.1.0"

__all__ = [
    # Core view-model components
    'ChangeNotifier',
    'Subscription',
    'CounterState',
    'RelayCommand',
    'IncrementCommand',
    'CommandConfigurationError',
    'SignalDescriptor',
    'CounterViewModel',

    # Configuration
    'ApplicationConfig',
    'Environment',
    'configure_logging',
    'get_config',
    'set_config',
]
