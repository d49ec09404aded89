"""Persisted user preferences.

Only one preference exists: the last unit system chosen in the form, stored
under ``bmiUnitSystem`` as "metric" or "imperial". Reads fall back to metric
and write failures are logged, never raised to the caller.
"""

import logging
import sqlite3
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from bmi_app.config import DEFAULT_UNIT_SYSTEM, UNIT_SYSTEM_KEY, prefs_db_path
from bmi_app.db import get_value, init_db, set_value
from bmi_app.models import UnitSystem

logger = logging.getLogger(__name__)

STORAGE_ERRORS = (sqlite3.Error, OSError)


class PreferenceStore:
    """Key-value preference storage backed by a SQLite file.

    Saves can run on a single background worker, so they apply in the order
    they were submitted. The futures returned by the async methods let
    callers wait for completion.
    """

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or prefs_db_path()
        self._pool = None

    def init(self) -> bool:
        """Create the storage. Returns False if the storage is unavailable."""
        try:
            init_db(self.db_path)
        except STORAGE_ERRORS as e:
            logger.warning("Preference storage unavailable at %s: %s", self.db_path, e)
            return False
        return True

    def load(self) -> UnitSystem:
        """Return the saved unit system, or metric if none is saved."""
        try:
            stored = get_value(self.db_path, UNIT_SYSTEM_KEY)
        except STORAGE_ERRORS as e:
            logger.warning("Could not read %s: %s", UNIT_SYSTEM_KEY, e)
            stored = None
        return UnitSystem.parse(stored or DEFAULT_UNIT_SYSTEM)

    def save(self, unit: UnitSystem) -> bool:
        """Persist the unit system. Returns False if the write failed."""
        try:
            set_value(self.db_path, UNIT_SYSTEM_KEY, unit.value)
        except STORAGE_ERRORS as e:
            logger.warning("Could not save %s=%s: %s", UNIT_SYSTEM_KEY, unit.value, e)
            return False
        logger.info("Saved %s=%s", UNIT_SYSTEM_KEY, unit.value)
        return True

    def load_async(self) -> Future:
        """Load on the background worker. The future resolves to a UnitSystem."""
        return self._executor().submit(self.load)

    def save_async(self, unit: UnitSystem) -> Future:
        """Fire-and-forget save. The future resolves to the save outcome."""
        return self._executor().submit(self.save, unit)

    def close(self) -> None:
        """Wait for pending saves, then stop the worker."""
        if self._pool is not None:
            self._pool.shutdown(wait=True)
            self._pool = None

    def _executor(self) -> ThreadPoolExecutor:
        if self._pool is None:
            self._pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="preferences")
        return self._pool
