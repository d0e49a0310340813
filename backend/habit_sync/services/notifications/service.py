"""
Notifications Service - State change delivery
Keeps the subscriber registry and publishes each new state snapshot
"""
import inspect
import logging
from typing import Any, Callable, List

from habit_sync.models.habit import UserState

logger = logging.getLogger(__name__)

# Signature: callback(state: UserState) -> None, or an async function
StateCallback = Callable[[UserState], Any]


class StateNotifier:
    """
    Registry of state subscribers.

    Subscribers are called in registration order with the new snapshot.
    A subscriber that raises is logged and skipped; the rest still run.
    """

    def __init__(self):
        self._subscribers: List[StateCallback] = []

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """
        Register a subscriber

        Args:
            callback: Called with every published UserState

        Returns:
            A function that removes the subscription when called
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    async def publish(self, state: UserState) -> int:
        """
        Deliver a snapshot to every subscriber

        Args:
            state: The snapshot that just replaced the previous one

        Returns:
            Number of subscribers that received it without error
        """
        delivered = 0
        # Copy so subscribers may unsubscribe while being notified
        for callback in list(self._subscribers):
            try:
                result = callback(state)
                if inspect.isawaitable(result):
                    await result
                delivered += 1
            except Exception as e:
                logger.error(f"State subscriber {getattr(callback, '__name__', callback)!r} failed: {e}")
        return delivered
