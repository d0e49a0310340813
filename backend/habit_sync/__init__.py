"""
Habit Sync - client-side habit store with default habit reconciliation
"""
from habit_sync.models import Habit, UserState, SyncResult, SyncStatus
from habit_sync.services.habits import HabitStore, PersistenceClient
from habit_sync.services.notifications import StateNotifier

__version__ = "0.1.0"

__all__ = [
    "Habit",
    "UserState",
    "SyncResult",
    "SyncStatus",
    "HabitStore",
    "PersistenceClient",
    "StateNotifier"
]
