"""
Application constants - default habit catalog and persistence endpoints
"""
from typing import Dict, List

# Length of the random session id assigned when a store is created
SESSION_ID_LENGTH = 16

# Persistence service endpoints
HABITS_ENDPOINT = "/habits"
CREATE_HABIT_ENDPOINT = "/habits/create"
RENAME_HABIT_ENDPOINT = "/habits/rename"
DELETE_HABIT_ENDPOINT = "/habits/delete"

# The five habits every user must have, keyed by reserved id
DEFAULT_HABITS: List[Dict[str, str]] = [
    {"id": "habit_talk", "name": "Talk to humans for 30 mins"},
    {"id": "habit_meditate", "name": "Meditate for 30 mins"},
    {"id": "habit_exercise", "name": "Exercise for 30 mins"},
    {"id": "habit_sleep", "name": "Sleep 8 hours"},
    {"id": "habit_fast", "name": "Fast for 14+ hours"},
]

DEFAULT_HABIT_IDS = frozenset(h["id"] for h in DEFAULT_HABITS)

# Scheduler job id for the periodic full refresh
RESYNC_JOB_ID = "habit_resync"
