# backend/utils/service_history.py
import logging
from collections import Counter, deque
from typing import Callable, List, Optional

from config import settings
from schemas.service_info import ServiceCallRecord, ServiceStats

logger = logging.getLogger(__name__)

Listener = Callable[[ServiceCallRecord], None]


class ServiceHistory:
    """Most recent failed backend calls, newest first, capped at `limit`.

    UI layers subscribe to be told about each new record instead of
    listening on a global event.
    """

    def __init__(self, limit: int = settings.SERVICE_HISTORY_LIMIT):
        self._records = deque(maxlen=limit)
        self._listeners: List[Listener] = []

    def record(self, entry: ServiceCallRecord) -> None:
        # appendleft on a bounded deque evicts the oldest from the right
        self._records.appendleft(entry)
        for listener in list(self._listeners):
            try:
                listener(entry)
            except Exception:
                logger.exception("Service info listener failed")

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def records(self) -> List[ServiceCallRecord]:
        return list(self._records)

    @property
    def latest(self) -> Optional[ServiceCallRecord]:
        return self._records[0] if self._records else None

    def clear(self) -> None:
        self._records.clear()

    def stats(self) -> ServiceStats:
        breakdown = Counter(r.service_name for r in self._records)
        latest = self.latest
        return ServiceStats(
            total_calls=len(self._records),
            unique_services=len(breakdown),
            service_breakdown=dict(breakdown),
            last_call=latest.timestamp if latest else None,
        )

    def __len__(self) -> int:
        return len(self._records)
