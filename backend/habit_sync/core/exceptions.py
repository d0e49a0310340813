"""
Custom Exceptions - Application-specific error types
"""

class HabitSyncException(Exception):
    """Base exception for all habit sync errors"""
    pass

class PersistenceError(HabitSyncException):
    """Raised when a call to the persistence service fails (network error or non-success status)"""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class SchedulerError(HabitSyncException):
    """Raised when scheduler operations fail"""
    pass
