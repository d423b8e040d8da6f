"""Result store: holds the current generation of loaded records."""

from __future__ import annotations

import logging
from typing import Iterable

from cts_dashboard.models.test_result import ResultSet, TestRecord

logger = logging.getLogger(__name__)


class ResultStore:
    """Owns the current ResultSet and arbitrates between competing loads.

    Every load attempt takes a token from ``begin_load``. Only the most
    recently begun load may publish; results from older attempts are dropped
    so a slow, stale fetch can never replace a fresher one.
    """

    def __init__(self) -> None:
        self._current = ResultSet()
        self._latest_token = 0
        self._pending_token: int | None = None

    @property
    def current(self) -> ResultSet:
        return self._current

    @property
    def loading(self) -> bool:
        return self._pending_token is not None

    def begin_load(self) -> int:
        self._latest_token += 1
        self._pending_token = self._latest_token
        logger.debug("Load #%d started", self._latest_token)
        return self._latest_token

    def publish(self, token: int, records: Iterable[TestRecord]) -> bool:
        """Install ``records`` as a new generation. Returns False if stale."""
        if token != self._latest_token:
            logger.warning(
                "Discarding results of load #%d; load #%d is newer",
                token, self._latest_token,
            )
            return False
        self._current = ResultSet(
            generation=self._current.generation + 1,
            records=tuple(records),
        )
        self._pending_token = None
        logger.info(
            "Published generation %d (%d records)",
            self._current.generation, len(self._current),
        )
        return True

    def fail(self, token: int, error: BaseException) -> None:
        """Record a failed load; the current generation is left untouched."""
        if token == self._pending_token:
            self._pending_token = None
        logger.debug(
            "Load #%d failed (%s); keeping generation %d",
            token, error, self._current.generation,
        )
