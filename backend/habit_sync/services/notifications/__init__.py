"""
Notifications module
Publishes state snapshots to subscribers
"""
from .service import StateNotifier, StateCallback

__all__ = [
    'StateNotifier',
    'StateCallback'
]
