"""
Scheduler Service - Background scheduler lifecycle management
Handles starting, stopping, and configuring the APScheduler instance
"""
import logging
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from habit_sync.core.constants import RESYNC_JOB_ID
from habit_sync.core.exceptions import SchedulerError
from habit_sync.services.habits import HabitStore
from .jobs import resync_habits

logger = logging.getLogger(__name__)


def start_scheduler(store: HabitStore, interval_seconds: int) -> AsyncIOScheduler:
    """
    Start the background scheduler on the running event loop
    Refreshes the store every `interval_seconds`

    Args:
        store: The habit store to refresh
        interval_seconds: Seconds between refreshes, must be positive

    Returns:
        The started scheduler

    Raises:
        SchedulerError: If the interval is not positive
    """
    if interval_seconds <= 0:
        raise SchedulerError(f"Resync interval must be positive, got {interval_seconds}")

    scheduler = AsyncIOScheduler()

    # A refresh that is still running blocks the next one
    scheduler.add_job(
        func=resync_habits,
        args=[store],
        trigger=IntervalTrigger(seconds=interval_seconds),
        id=RESYNC_JOB_ID,
        name='Resync habits and restore default habits',
        max_instances=1,
        coalesce=True,
        replace_existing=True
    )

    scheduler.start()
    logger.info(f"Scheduler started - resyncing every {interval_seconds} seconds")
    return scheduler


def stop_scheduler(scheduler: AsyncIOScheduler) -> None:
    """
    Stop the background scheduler
    The shutdown itself runs on the event loop's next iteration
    """
    if scheduler is not None and scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler shutdown requested")
