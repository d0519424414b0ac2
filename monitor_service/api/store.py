# This file holds monitor records in process memory behind a small store object.
# It exists so services depend on an injectable store instead of a module-level list.
# Id assignment and append happen under one lock, so concurrent creates never share an id.

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from monitor_service.api.schemas.monitor_schemas import MonitorDraft, MonitorRecord

logger = logging.getLogger(__name__)

SEED_RECORDS: tuple[MonitorRecord, ...] = (
    MonitorRecord(
        transaction_id=10,
        topic_id=10,
        transaction_datetime="10/20/2024 4:00",
        number_param=555555,
        time_param="4:00",
        weekday_param=None,
        day_param=None,
        is_fix="N",
    ),
    MonitorRecord(
        transaction_id=20,
        topic_id=20,
        transaction_datetime="10/20/2024 4:00",
        number_param=200,
        time_param="4:00",
        weekday_param=None,
        day_param=None,
        is_fix="N",
    ),
)


class MonitorStore:
    """Ordered, append-only collection of monitor records."""

    def __init__(self, records: Iterable[MonitorRecord] = ()) -> None:
        self._lock = threading.Lock()
        self._records: list[MonitorRecord] = []
        for record in records:
            self._insert(record)

    @classmethod
    def seeded(cls) -> MonitorStore:
        return cls(SEED_RECORDS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def all(self) -> list[MonitorRecord]:
        with self._lock:
            return list(self._records)

    def find(self, transaction_id: int) -> MonitorRecord | None:
        with self._lock:
            for record in self._records:
                if record.transaction_id == transaction_id:
                    return record
        return None

    def next_transaction_id(self) -> int:
        with self._lock:
            return self._next_id_unlocked()

    def append(self, draft: MonitorDraft) -> MonitorRecord:
        """Assign the next transaction id to ``draft`` and store it."""

        with self._lock:
            record = draft.to_record(self._next_id_unlocked())
            self._records.append(record)
        logger.info("Stored monitor transaction_id=%s topic_id=%s", record.transaction_id, record.topic_id)
        return record

    def _next_id_unlocked(self) -> int:
        return max((record.transaction_id for record in self._records), default=0) + 1

    def _insert(self, record: MonitorRecord) -> None:
        if any(existing.transaction_id == record.transaction_id for existing in self._records):
            raise ValueError(f"Duplicate transaction_id: {record.transaction_id}")
        self._records.append(record)
