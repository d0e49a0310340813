"""
Dependency injection for shared clients and resources
"""
from fastapi import Request

from habit_sync.core.config import settings
from habit_sync.services.habits import HabitStore, PersistenceClient
from habit_sync.services.notifications import StateNotifier
from habit_sync.utils.ids import generate_random_string


def get_persistence_client() -> PersistenceClient:
    """Get a persistence service client configured from settings"""
    return PersistenceClient(settings.API_BASE_URL, timeout=settings.REQUEST_TIMEOUT_SECONDS)


def create_habit_store(persistence: PersistenceClient) -> HabitStore:
    """Build the habit store for one session"""
    return HabitStore(persistence, id_generator=generate_random_string, notifier=StateNotifier())


def get_habit_store(request: Request) -> HabitStore:
    """Get the store owned by the running application"""
    return request.app.state.habit_store
