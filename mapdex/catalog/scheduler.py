# -*- coding: utf-8 -*-
"""
Update Scheduler - Decide when the map update check is due.

The time of the last check is kept in a StateStore as epoch
milliseconds. A check is due when the last one happened more than
``threshold_days`` ago. ``is_check_due`` resets the stored time to now
whenever it is asked, whatever the answer, so a caller that skips a due
check (e.g. because the listing could not be fetched) is not asked again
until the threshold has passed once more. ``evaluate`` and
``mark_checked`` expose the two halves separately.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import json
import logging
import time
from pathlib import Path
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


THRESHOLD_DAYS = 7
LAST_CHECK_KEY = "last_check_for_map_updates"

_MILLIS_PER_DAY = 24 * 60 * 60 * 1000


class StateStore(Protocol):
    """Persisted epoch-milliseconds timestamp of the last update check."""

    def get(self) -> int: ...

    def set(self, value: int) -> None: ...


class InMemoryStateStore:
    """StateStore kept in memory, for tests and embedding."""

    def __init__(self, value: int = 0) -> None:
        self._value = value

    def get(self) -> int:
        return self._value

    def set(self, value: int) -> None:
        self._value = value


class JsonStateStore:
    """StateStore persisted as a small JSON document.

    Parameters
    ----------
    path : Path
        JSON file holding ``{"last_check_for_map_updates": <millis>}``.
        Other keys in the file are preserved on write.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def get(self) -> int:
        data = self._load()
        value = data.get(LAST_CHECK_KEY, 0)
        if isinstance(value, bool) or not isinstance(value, int):
            logger.warning(
                "Ignoring invalid %s in %s: %r", LAST_CHECK_KEY, self.path, value
            )
            return 0
        return value

    def set(self, value: int) -> None:
        data = self._load()
        data[LAST_CHECK_KEY] = int(value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read state from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Unexpected state structure in %s", self.path)
            return {}
        return data


def _now_millis() -> int:
    return int(time.time() * 1000)


class UpdateScheduler:
    """Gate for the periodic map update check.

    Parameters
    ----------
    store : StateStore
        Holds the last check time.
    threshold_days : int
        Minimum days between checks. Default 7.
    clock : Callable[[], int]
        Returns the current epoch milliseconds.
    """

    def __init__(
        self,
        store: StateStore,
        threshold_days: int = THRESHOLD_DAYS,
        clock: Callable[[], int] = _now_millis,
    ) -> None:
        self._store = store
        self._threshold_days = threshold_days
        self._clock = clock

    @property
    def threshold_days(self) -> int:
        return self._threshold_days

    def evaluate(self, now: Optional[int] = None) -> bool:
        """Return True if the last check is strictly older than the threshold.

        Does not modify the stored time.

        Parameters
        ----------
        now : Optional[int]
            Current epoch milliseconds. Defaults to the clock.

        Returns
        -------
        bool
        """
        now = self._clock() if now is None else now
        cutoff = now - self._threshold_days * _MILLIS_PER_DAY
        return self._store.get() < cutoff

    def mark_checked(self, now: Optional[int] = None) -> None:
        """Record ``now`` as the time of the last check."""
        now = self._clock() if now is None else now
        self._store.set(now)

    def is_check_due(self) -> bool:
        """Evaluate and reset the last check time to now.

        The stored time is overwritten whatever the answer.

        Returns
        -------
        bool
            True if an update check is due.
        """
        now = self._clock()
        due = self.evaluate(now)
        self.mark_checked(now)
        logger.debug("Map update check due: %s", due)
        return due
