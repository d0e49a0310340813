"""
Baseline reconciliation - keeps the default habit catalog present server-side
Detects missing default habits on refresh and creates them
"""
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple
import logging

from pydantic import ValidationError

from habit_sync.core.constants import DEFAULT_HABITS
from habit_sync.models.habit import Habit, HabitsResponse

logger = logging.getLogger(__name__)


def parse_habits_response(body: Optional[Dict[str, Any]]) -> Optional[HabitsResponse]:
    """
    Parse a persistence service body

    Args:
        body: Decoded JSON body, or None

    Returns:
        HabitsResponse, or None if the body has no valid habit collection
    """
    if not isinstance(body, dict) or body.get("habits") is None:
        return None

    try:
        return HabitsResponse.model_validate(body)
    except ValidationError as e:
        logger.warning(f"Invalid habit collection in response: {e.error_count()} error(s)")
        return None


def default_habits(catalog: Iterable[Dict[str, str]] = DEFAULT_HABITS) -> List[Habit]:
    """Build fresh Habit objects for every catalog entry"""
    return [Habit(id=entry["id"], name=entry["name"]) for entry in catalog]


def plan_missing_defaults(habits: Iterable[Habit],
                          catalog: Iterable[Dict[str, str]] = DEFAULT_HABITS) -> List[Dict[str, str]]:
    """
    Find the catalog entries whose id is absent from a habit collection

    Args:
        habits: Habits reported by the server
        catalog: Default habit catalog

    Returns:
        Missing catalog entries, in catalog order
    """
    present_ids = {habit.id for habit in habits}
    return [entry for entry in catalog if entry["id"] not in present_ids]


def _has_habits(body: Optional[Dict[str, Any]]) -> bool:
    return isinstance(body, dict) and bool(body.get("habits"))


async def reconcile(persistence, next_sequence: Callable[[], int],
                    catalog: Iterable[Dict[str, str]] = DEFAULT_HABITS) -> Tuple[int, Optional[HabitsResponse]]:
    """
    Fetch the habit collection and create any missing default habits

    Creation calls are made one at a time. Errors from the persistence
    service are not caught here; the first one ends the pass.

    Args:
        persistence: Persistence service (get_habits / create_habit)
        next_sequence: Issues the ordering number for a request whose
                       response may be applied
        catalog: Default habit catalog

    Returns:
        Tuple of (sequence number, response to apply or None)
    """
    catalog = list(catalog)

    sequence = next_sequence()
    body = await persistence.get_habits()

    if not _has_habits(body):
        # Cold start: the catalog is exactly what the server now holds
        logger.info(f"No habits on server, seeding {len(catalog)} default habit(s)")
        for entry in catalog:
            sequence = next_sequence()
            await persistence.create_habit(entry["name"], entry["id"])
        return sequence, HabitsResponse(habits=default_habits(catalog))

    fetched = parse_habits_response(body)
    if fetched is None:
        logger.warning("Skipping reconciliation, habit collection could not be parsed")
        return sequence, None

    missing = plan_missing_defaults(fetched.habits, catalog)
    if not missing:
        return sequence, fetched

    logger.info(f"Creating missing default habit(s): {', '.join(entry['id'] for entry in missing)}")
    for entry in missing:
        await persistence.create_habit(entry["name"], entry["id"])

    sequence = next_sequence()
    return sequence, parse_habits_response(await persistence.get_habits())
