"""
Habits Service - Local habit store
Mediates every change to the user's habits through the persistence service
"""
from typing import Any, Callable, Dict, Iterable, List, Optional
import asyncio
import logging

from habit_sync.core.constants import DEFAULT_HABITS, SESSION_ID_LENGTH
from habit_sync.models.habit import Habit, HabitsResponse, UserState
from habit_sync.models.result import SyncResult, SyncStatus
from habit_sync.services.notifications import StateNotifier, StateCallback
from habit_sync.utils.ids import generate_random_string
from .reconciler import parse_habits_response, reconcile

logger = logging.getLogger(__name__)


def unique_by_id(habits: Iterable[Habit]) -> List[Habit]:
    """
    Drop habits whose id was already seen, keeping the first occurrence

    Args:
        habits: Habits in server order

    Returns:
        List with unique ids
    """
    seen = set()
    unique = []
    for habit in habits:
        if habit.id in seen:
            logger.warning(f"Dropping duplicate habit id from server snapshot: {habit.id}")
            continue
        seen.add(habit.id)
        unique.append(habit)
    return unique


class HabitStore:
    """
    Single source of truth for the current user's habits.

    State only changes when the persistence service confirms it: each
    applied response replaces the whole UserState. Responses are tagged
    with a sequence number when their request is issued, and a response
    older than the last applied one is discarded. Only one full refresh
    runs at a time; a second caller waits for the first to finish.
    """

    def __init__(self, persistence,
                 id_generator: Callable[[int], str] = generate_random_string,
                 notifier: Optional[StateNotifier] = None,
                 default_habits: Iterable[Dict[str, str]] = DEFAULT_HABITS):
        """
        Initialize the store

        Args:
            persistence: Persistence service with async get_habits, create_habit,
                         rename_habit and delete_habit
            id_generator: Produces the session id, called once with SESSION_ID_LENGTH
            notifier: Subscriber registry (a new one is created if omitted)
            default_habits: Catalog the refresh keeps present server-side
        """
        self._persistence = persistence
        self._notifier = notifier or StateNotifier()
        self._default_habits = list(default_habits)
        self._state = UserState(id=id_generator(SESSION_ID_LENGTH))
        self._issued_sequence = 0
        self._applied_sequence = 0
        self._refresh_lock = asyncio.Lock()

    @property
    def state(self) -> UserState:
        return self._state

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """Register a callback for every new state; returns its unsubscribe function"""
        return self._notifier.subscribe(callback)

    # ========================================================================
    # OPERATIONS
    # ========================================================================

    async def create_habit(self, name: str, habit_id: Optional[str] = None) -> SyncResult:
        """
        Create a habit

        Args:
            name: Habit name
            habit_id: Reserved id, only for default habits

        Returns:
            SyncResult for the operation
        """
        return await self._mutate("create_habit", self._persistence.create_habit, name, habit_id)

    async def rename_habit(self, habit_id: str, name: str) -> SyncResult:
        """Rename a habit"""
        return await self._mutate("rename_habit", self._persistence.rename_habit, habit_id, name)

    async def delete_habit(self, habit_id: str) -> SyncResult:
        """Delete a habit"""
        return await self._mutate("delete_habit", self._persistence.delete_habit, habit_id)

    async def update_user_info(self) -> SyncResult:
        """
        Refresh the full habit collection, creating missing default habits first

        Returns:
            SyncResult for the refresh
        """
        # Overlapping refreshes would both seed the same reserved ids
        async with self._refresh_lock:
            try:
                sequence, response = await reconcile(self._persistence, self._next_sequence, self._default_habits)
            except Exception as e:
                return self._failed("update_user_info", e)

            return await self._apply("update_user_info", sequence, response)

    # ========================================================================
    # STATE APPLICATION
    # ========================================================================

    def _next_sequence(self) -> int:
        self._issued_sequence += 1
        return self._issued_sequence

    async def _mutate(self, operation: str, call: Callable[..., Any], *args) -> SyncResult:
        sequence = self._next_sequence()
        try:
            body = await call(*args)
        except Exception as e:
            return self._failed(operation, e)

        return await self._apply(operation, sequence, parse_habits_response(body))

    async def _apply(self, operation: str, sequence: int,
                     response: Optional[HabitsResponse]) -> SyncResult:
        if response is None:
            logger.warning(f"{operation}: response has no habit collection, keeping current state")
            return SyncResult(status=SyncStatus.NOOP, state=self._state)

        if sequence < self._applied_sequence:
            logger.warning(
                f"{operation}: discarding stale response #{sequence}, "
                f"#{self._applied_sequence} already applied"
            )
            return SyncResult(status=SyncStatus.STALE, state=self._state)

        update = {"habits": unique_by_id(response.habits), "loaded": True}
        if response.created is not None:
            update["created"] = response.created

        self._applied_sequence = sequence
        self._state = self._state.model_copy(update=update)
        logger.info(f"{operation}: applied snapshot #{sequence} with {len(self._state.habits)} habit(s)")

        await self._notifier.publish(self._state)
        return SyncResult(status=SyncStatus.APPLIED, state=self._state)

    def _failed(self, operation: str, error: Exception) -> SyncResult:
        logger.error(f"{operation} failed: {error}")
        return SyncResult(status=SyncStatus.FAILED, state=self._state, error=error)
