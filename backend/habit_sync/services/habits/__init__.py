"""
Habits module - Local habit store and baseline reconciliation
"""
from . import repository
from . import reconciler
from . import service

from .repository import PersistenceClient
from .reconciler import (
    default_habits,
    parse_habits_response,
    plan_missing_defaults,
    reconcile
)
from .service import HabitStore, unique_by_id

__all__ = [
    # Modules
    'repository',
    'reconciler',
    'service',

    # Persistence
    'PersistenceClient',

    # Reconciliation
    'default_habits',
    'parse_habits_response',
    'plan_missing_defaults',
    'reconcile',

    # Store
    'HabitStore',
    'unique_by_id'
]
