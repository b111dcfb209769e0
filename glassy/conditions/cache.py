"""스팟별 컨디션 캐시입니다. / Per-spot conditions cache."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Protocol, Sequence, Set

from ..spots.catalog import Location
from .client import ConditionsError
from .models import ConditionsRecord

LOGGER = logging.getLogger("glassy.conditions.cache")


class EntryStatus(str, Enum):
    """캐시 엔트리 상태입니다. / Cache entry status."""

    ABSENT = "absent"
    PENDING = "pending"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass(frozen=True)
class CacheEntry:
    """캐시 엔트리 구조입니다. / Cache entry structure."""

    status: EntryStatus
    record: Optional[ConditionsRecord] = None
    error: Optional[ConditionsError] = None
    generation: int = 0


ABSENT_ENTRY = CacheEntry(status=EntryStatus.ABSENT)


class ConditionsFetcher(Protocol):
    """컨디션 조회 인터페이스입니다. / Conditions fetch interface."""

    async def fetch_conditions(self, location: Location) -> ConditionsRecord: ...


class ConditionsCache:
    """세션 공유 컨디션 캐시입니다. / Session-wide conditions cache.

    One instance is created per application session and handed to every
    consumer. Reads are synchronous; fetches run as tasks on the running
    event loop and write back only when they are still the latest request
    issued for their spot.
    """

    def __init__(self, client: ConditionsFetcher) -> None:
        self.client = client
        self._entries: Dict[str, CacheEntry] = {}
        self._generations: Dict[str, int] = {}
        self._tasks: Set[asyncio.Task[None]] = set()
        self._bulk_task: Optional[asyncio.Task[None]] = None

    def get(self, location_id: str) -> CacheEntry:
        """현재 엔트리를 읽습니다. / Read the current entry."""

        return self._entries.get(location_id, ABSENT_ENTRY)

    def entries(self, locations: Sequence[Location]) -> Dict[str, CacheEntry]:
        """스팟 순서대로 엔트리를 모읍니다. / Collect entries in spot order."""

        return {location.id: self.get(location.id) for location in locations}

    @property
    def is_refreshing(self) -> bool:
        """일괄 갱신 진행 여부입니다. / Whether a bulk refresh is running."""

        return self._bulk_task is not None and not self._bulk_task.done()

    def refresh_one(self, location: Location) -> asyncio.Task[None]:
        """스팟 하나를 갱신합니다. / Refresh a single spot.

        Marks the entry pending and schedules the fetch without waiting for
        it. The returned task never raises fetch errors.
        """

        generation = self._next_generation(location.id)
        self._entries[location.id] = CacheEntry(
            status=EntryStatus.PENDING,
            generation=generation,
        )
        task = asyncio.get_running_loop().create_task(
            self._fetch(location, generation),
            name=f"conditions:{location.id}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def refresh_all(
        self, locations: Sequence[Location]
    ) -> Optional[asyncio.Task[None]]:
        """모든 스팟을 갱신합니다. / Refresh every spot.

        Returns ``None`` without touching the cache while another bulk
        refresh is running. Otherwise returns a task that completes once
        every fanned-out fetch has completed.
        """

        if self.is_refreshing:
            LOGGER.info("refresh_skipped", extra={"reason": "in_progress"})
            return None
        for location_id in list(self._generations):
            self._next_generation(location_id)
        self._entries.clear()
        tasks = [self.refresh_one(location) for location in locations]
        self._bulk_task = asyncio.get_running_loop().create_task(
            self._join(tasks),
            name="conditions:refresh-all",
        )
        return self._bulk_task

    async def wait_for_refresh(self) -> None:
        """진행 중인 일괄 갱신을 기다립니다. / Await the running bulk refresh."""

        if self._bulk_task is not None:
            await self._bulk_task

    def _next_generation(self, location_id: str) -> int:
        generation = self._generations.get(location_id, 0) + 1
        self._generations[location_id] = generation
        return generation

    async def _fetch(self, location: Location, generation: int) -> None:
        try:
            record = await self.client.fetch_conditions(location)
        except ConditionsError as exc:
            LOGGER.warning(
                "conditions_failed",
                extra={"spot": location.id, "error": str(exc)},
            )
            entry = CacheEntry(
                status=EntryStatus.FAILED, error=exc, generation=generation
            )
        except Exception as exc:
            LOGGER.exception(
                "conditions_unexpected_error",
                extra={"spot": location.id, "error": str(exc)},
            )
            wrapped = ConditionsError(str(exc))
            wrapped.__cause__ = exc
            entry = CacheEntry(
                status=EntryStatus.FAILED, error=wrapped, generation=generation
            )
        else:
            entry = CacheEntry(
                status=EntryStatus.RESOLVED, record=record, generation=generation
            )
        if self._generations.get(location.id) != generation:
            LOGGER.info(
                "conditions_stale_discarded",
                extra={"spot": location.id, "generation": generation},
            )
            return
        self._entries[location.id] = entry

    async def _join(self, tasks: List[asyncio.Task[None]]) -> None:
        started = time.monotonic()
        await asyncio.gather(*tasks)
        LOGGER.info(
            "refresh_complete",
            extra={
                "spots": len(tasks),
                "elapsed_seconds": round(time.monotonic() - started, 3),
            },
        )
