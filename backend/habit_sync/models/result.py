"""
Result type returned by every store operation
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from habit_sync.models.habit import UserState


class SyncStatus(str, Enum):
    """Outcome of a store operation"""
    APPLIED = "applied"  # a server snapshot replaced local state
    NOOP = "noop"        # response had no habit collection, state kept
    STALE = "stale"      # a newer response was already applied, state kept
    FAILED = "failed"    # hard failure, state kept


class SyncResult(BaseModel):
    """
    What happened to local state after a store operation.

    Attributes:
        status: One of SyncStatus
        state: The store's state once the operation settled
        error: The exception behind a FAILED result
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: SyncStatus
    state: UserState
    error: Optional[Exception] = None

    @property
    def applied(self) -> bool:
        return self.status == SyncStatus.APPLIED

    @property
    def failed(self) -> bool:
        return self.status == SyncStatus.FAILED

    def raise_for_error(self) -> "SyncResult":
        """Re-raise the captured exception of a FAILED result, otherwise return self"""
        if self.error is not None:
            raise self.error
        return self
