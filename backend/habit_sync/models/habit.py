"""
Pydantic models for habits and the user session state
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Union

# Epoch number or ISO-8601 string, whichever the persistence service sends
Timestamp = Union[int, float, str]


class Habit(BaseModel):
    """A trackable habit as stored by the persistence service"""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1, description="Stable habit id")
    name: str = Field(..., description="Display name")
    completed: List[str] = Field(default_factory=list, description="Completion markers (dates/timestamps)")
    created: Optional[Timestamp] = Field(None, description="Creation timestamp set by the persistence service")


class UserState(BaseModel):
    """
    Snapshot of the current user's session.

    Snapshots are never edited in place; the store swaps in a new one
    for every applied response.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Random session id, generated once per store")
    loaded: bool = Field(False, description="True once the first sync has been applied")
    habits: List[Habit] = Field(default_factory=list)
    created: Optional[Timestamp] = None


class HabitsResponse(BaseModel):
    """Body returned by every persistence service call"""
    model_config = ConfigDict(extra="ignore")

    habits: Optional[List[Habit]] = None
    created: Optional[Timestamp] = None


class CreateHabitRequest(BaseModel):
    """Request model for creating a habit"""
    name: str = Field(..., min_length=1, max_length=200, description="Habit name")
    id: Optional[str] = Field(None, min_length=1, description="Reserved id, only sent for default habits")


class RenameHabitRequest(BaseModel):
    """Request model for renaming a habit"""
    id: str = Field(..., min_length=1, description="Habit id")
    name: str = Field(..., min_length=1, max_length=200, description="New habit name")


class DeleteHabitRequest(BaseModel):
    """Request model for deleting a habit"""
    id: str = Field(..., min_length=1, description="Habit id")
