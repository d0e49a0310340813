"""
Business logic services
"""
from . import habits
from . import notifications
from . import scheduler

__all__ = [
    'habits',
    'notifications',
    'scheduler'
]
