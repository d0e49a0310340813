"""
Pydantic models for the application
"""
from habit_sync.models.habit import (
    Habit,
    UserState,
    HabitsResponse,
    CreateHabitRequest,
    RenameHabitRequest,
    DeleteHabitRequest
)
from habit_sync.models.result import SyncResult, SyncStatus

__all__ = [
    "Habit",
    "UserState",
    "HabitsResponse",
    "CreateHabitRequest",
    "RenameHabitRequest",
    "DeleteHabitRequest",
    "SyncResult",
    "SyncStatus"
]
