"""
Change Notification

Publish/subscribe registry for property-change events. A presentation layer
subscribes a listener, receives the name of every property that changes, and
re-reads the view-model to refresh itself.
"""

import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict

logger = logging.getLogger(__name__)

Listener = Callable[[str], None]

_subscription_ids = itertools.count(1)


@dataclass(frozen=True)
class Subscription:
    """Opaque handle for a registered listener, used to unsubscribe."""
    id: int = field(default_factory=lambda: next(_subscription_ids))

    def __repr__(self):
        return f"Subscription({self.id})"


class ChangeNotifier:
    """
    Registry of change listeners.

    Listeners are called synchronously, in registration order, with the name
    of the property that changed. Delivery works on a snapshot of the
    registry, so a listener that subscribes or unsubscribes while being
    notified only affects later notifications.
    """

    def __init__(self):
        self._listeners: Dict[Subscription, Listener] = {}

    def subscribe(self, listener: Listener) -> Subscription:
        """
        Register a listener for change notifications.

        Args:
            listener: Callable accepting the changed property name

        Returns:
            Subscription handle to pass to unsubscribe
        """
        subscription = Subscription()
        self._listeners[subscription] = listener
        logger.debug(f"Subscribed {subscription} ({self.subscriber_count} active)")
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a listener. Unknown or already removed handles are ignored."""
        if self._listeners.pop(subscription, None) is not None:
            logger.debug(f"Unsubscribed {subscription} ({self.subscriber_count} active)")

    def notify(self, property_name: str) -> None:
        """Invoke every subscribed listener with the changed property name."""
        listeners = list(self._listeners.values())
        if not listeners:
            return

        logger.debug(f"Notifying {len(listeners)} listener(s) of '{property_name}'")
        for listener in listeners:
            listener(property_name)

    def clear(self) -> None:
        """Remove all listeners."""
        self._listeners.clear()

    @property
    def subscriber_count(self) -> int:
        """Get the number of active listeners."""
        return len(self._listeners)
