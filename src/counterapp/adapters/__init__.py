"""
Web adapters

Adapters binding the view-model to web frameworks.
"""

from .fasthtml import configure_app, SignalStream

__all__ = ["configure_app", "SignalStream"]
