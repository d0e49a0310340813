"""
FastAPI Application Entry Point
Local state API: owns the habit store for this session and serves it to the UI
"""
from contextlib import asynccontextmanager
import logging
import uvicorn
from fastapi import FastAPI
from habit_sync.core.config import settings
from habit_sync.core.dependencies import get_persistence_client, create_habit_store
from habit_sync.routes import habits, health
from habit_sync.services.scheduler import start_scheduler, stop_scheduler

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Silence noisy third-party loggers
logging.getLogger('urllib3').setLevel(logging.WARNING)
logging.getLogger('apscheduler.scheduler').setLevel(logging.WARNING)
logging.getLogger('apscheduler.executors').setLevel(logging.WARNING)
logging.getLogger('apscheduler.executors.default').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup/shutdown events
    """
    # Startup
    persistence = get_persistence_client()
    app.state.scheduler = None

    try:
        store = create_habit_store(persistence)
        app.state.habit_store = store

        result = await store.update_user_info()
        logger.info(f"✓ Initial sync: {result.status.value}")

        if settings.SYNC_INTERVAL_SECONDS > 0:
            try:
                app.state.scheduler = start_scheduler(store, settings.SYNC_INTERVAL_SECONDS)
                logger.info("✓ Habit resync scheduler started")
            except Exception as e:
                logger.warning(f"Could not start scheduler: {e}")

        yield
    finally:
        # Shutdown
        if app.state.scheduler is not None:
            try:
                stop_scheduler(app.state.scheduler)
                logger.info("✓ Habit resync scheduler stopping")
            except Exception as e:
                logger.warning(f"Error stopping scheduler: {e}")
        persistence.close()


def create_app() -> FastAPI:
    """Build the application with all routes registered"""
    application = FastAPI(
        title="Habit Sync API",
        version="0.1.0",
        lifespan=lifespan
    )

    # Register routes
    application.include_router(health.router)
    application.include_router(habits.router)
    return application


app = create_app()


def run():
    """Serve the local state API"""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
