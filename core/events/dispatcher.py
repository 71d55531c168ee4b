"""
Event dispatcher for lifecycle notifications.

Each channel name maps to its own django.dispatch.Signal. Receivers are called
with `sender=<channel name>` and `payload=<object or None>`. Dispatch is
fire-and-forget: a failing receiver is logged and never reaches the caller.
"""
import logging
from threading import Lock

from django.dispatch import Signal

logger = logging.getLogger(__name__)


class EventDispatcher:
    """Registry of named signals"""

    def __init__(self):
        self._signals = {}
        self._lock = Lock()

    def signal(self, name) -> Signal:
        """Get (or create) the signal for a channel"""
        with self._lock:
            if name not in self._signals:
                self._signals[name] = Signal()
            return self._signals[name]

    def listen(self, name, receiver, weak=False):
        """
        Subscribe `receiver(sender, payload, **kwargs)` to a channel.

        Receivers are held strongly by default so lambdas and closures stay
        subscribed.
        """
        self.signal(name).connect(receiver, weak=weak)
        return receiver

    def forget(self, name, receiver):
        """Unsubscribe a receiver from a channel"""
        return self.signal(name).disconnect(receiver)

    def dispatch(self, name, payload=None):
        """
        Notify every receiver of a channel.

        Returns:
            List of (receiver, response) tuples as returned by send_robust
        """
        logger.debug(f"Dispatching event '{name}'")
        responses = self.signal(name).send_robust(sender=name, payload=payload)

        for receiver, response in responses:
            if isinstance(response, Exception):
                logger.error(
                    f"Listener {getattr(receiver, '__name__', receiver)!r} failed on '{name}': {response}",
                    exc_info=(type(response), response, response.__traceback__)
                )

        return responses


_default_dispatcher = EventDispatcher()


def get_event_dispatcher() -> EventDispatcher:
    """The process-wide dispatcher handed to service operations by the views"""
    return _default_dispatcher
