"""
Habits Repository - Persistence service access layer
All HTTP calls for reading and changing the user's habits
"""
import asyncio
from typing import Any, Dict, Optional
import logging
import threading

import requests

from habit_sync.core.constants import (
    HABITS_ENDPOINT,
    CREATE_HABIT_ENDPOINT,
    RENAME_HABIT_ENDPOINT,
    DELETE_HABIT_ENDPOINT
)
from habit_sync.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class PersistenceClient:
    """
    Client for the remote persistence service.

    Each call returns the decoded JSON body, or None when the body is empty,
    not JSON, or not an object. Transport failures and non-success statuses
    raise PersistenceError. Blocking requests run in a worker thread so the
    calls can be awaited from the event loop. requests.Session is not
    thread-safe, so worker threads take turns on the shared session.
    """

    def __init__(self, base_url: str, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session_lock = threading.Lock()

    # ========================================================================
    # HABITS
    # ========================================================================

    async def get_habits(self) -> Optional[Dict[str, Any]]:
        """Fetch the full habit collection"""
        return await self._call("GET", HABITS_ENDPOINT)

    async def create_habit(self, name: str, habit_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """
        Create a habit

        Args:
            name: Habit name
            habit_id: Reserved id, only sent when creating a default habit

        Returns:
            Response body or None
        """
        payload = {"name": name}
        if habit_id is not None:
            payload["id"] = habit_id
        return await self._call("POST", CREATE_HABIT_ENDPOINT, payload)

    async def rename_habit(self, habit_id: str, name: str) -> Optional[Dict[str, Any]]:
        """Rename a habit"""
        return await self._call("POST", RENAME_HABIT_ENDPOINT, {"id": habit_id, "name": name})

    async def delete_habit(self, habit_id: str) -> Optional[Dict[str, Any]]:
        """Delete a habit"""
        return await self._call("POST", DELETE_HABIT_ENDPOINT, {"id": habit_id})

    def close(self) -> None:
        """Release pooled connections"""
        with self.session_lock:
            self.session.close()

    # ========================================================================
    # TRANSPORT
    # ========================================================================

    async def _call(self, method: str, path: str,
                    payload: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        return await asyncio.to_thread(self._request, method, path, payload)

    def _request(self, method: str, path: str,
                 payload: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url} {payload or ''}")

        try:
            with self.session_lock:
                response = self.session.request(method, url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.error(f"Persistence service returned {status_code} for {method} {path}")
            raise PersistenceError(f"{method} {path} failed with status {status_code}", status_code)
        except requests.RequestException as e:
            logger.error(f"Persistence service error for {method} {path}: {e}")
            raise PersistenceError(f"{method} {path} failed: {e}")

        if not response.content:
            return None

        try:
            body = response.json()
        except ValueError:
            logger.warning(f"Non-JSON response from {method} {path}")
            return None

        if not isinstance(body, dict):
            logger.warning(f"Unexpected response shape from {method} {path}: {type(body).__name__}")
            return None

        return body
