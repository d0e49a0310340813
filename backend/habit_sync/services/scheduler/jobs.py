"""
Scheduler Job Definitions
Periodic full refresh of the habit store
"""
import logging

from habit_sync.models.result import SyncResult, SyncStatus
from habit_sync.services.habits import HabitStore

logger = logging.getLogger(__name__)


async def resync_habits(store: HabitStore) -> SyncResult:
    """
    Run a full refresh, which also recreates any missing default habits
    Called every SYNC_INTERVAL_SECONDS by the scheduler
    """
    logger.info("[SCHEDULER] Resyncing habits...")
    result = await store.update_user_info()

    if result.status == SyncStatus.FAILED:
        logger.error(f"[SCHEDULER] Resync failed: {result.error}")
    else:
        logger.info(f"[SCHEDULER] Resync finished: {result.status.value}, {len(result.state.habits)} habit(s)")

    return result
