"""
Scheduler module
Background job scheduling for periodic habit resync
"""
from .service import start_scheduler, stop_scheduler
from . import jobs

__all__ = ['start_scheduler', 'stop_scheduler', 'jobs']
