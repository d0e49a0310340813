"""
Habit Routes - Local endpoints for the UI to read and change habit state
"""
from fastapi import APIRouter, Depends, HTTPException
from habit_sync.core.dependencies import get_habit_store
from habit_sync.models.habit import (
    CreateHabitRequest,
    RenameHabitRequest,
    DeleteHabitRequest
)
from habit_sync.models.result import SyncResult
from habit_sync.services.habits import HabitStore

router = APIRouter(tags=["habits"])


def _to_response(result: SyncResult):
    """Turn a store result into a response body, or a 502 for hard failures"""
    if result.failed:
        raise HTTPException(status_code=502, detail=f"Persistence service error: {result.error}")
    return {"status": result.status.value, "state": result.state.model_dump()}


@router.get("/state")
async def get_state(store: HabitStore = Depends(get_habit_store)):
    """Get the current habit state"""
    return store.state.model_dump()


@router.post("/habits/sync")
async def sync_habits(store: HabitStore = Depends(get_habit_store)):
    """Refresh from the persistence service and restore missing default habits"""
    return _to_response(await store.update_user_info())


@router.post("/habits/create")
async def create_habit(request: CreateHabitRequest, store: HabitStore = Depends(get_habit_store)):
    """Create a habit"""
    return _to_response(await store.create_habit(request.name, request.id))


@router.post("/habits/rename")
async def rename_habit(request: RenameHabitRequest, store: HabitStore = Depends(get_habit_store)):
    """Rename a habit"""
    return _to_response(await store.rename_habit(request.id, request.name))


@router.post("/habits/delete")
async def delete_habit(request: DeleteHabitRequest, store: HabitStore = Depends(get_habit_store)):
    """Delete a habit"""
    return _to_response(await store.delete_habit(request.id))
