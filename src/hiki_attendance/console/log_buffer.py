from __future__ import annotations

import logging
from collections import deque
from datetime import datetime, timezone
from typing import Deque, List, Optional

from .model import ConsoleLogEntry


class ConsoleLogBuffer(logging.Handler):
    """Keeps the most recent log records in memory for the console API.

    Bounded: once ``capacity`` entries are held the oldest one is dropped.
    Reads and writes go through the handler lock.
    """

    def __init__(self, capacity: int, level: int = logging.INFO):
        super().__init__(level=level)
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self._entries: Deque[ConsoleLogEntry] = deque(maxlen=capacity)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = ConsoleLogEntry(
                timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
                level=record.levelname,
                logger=record.name,
                message=record.getMessage(),
            )
        except Exception:
            self.handleError(record)
            return
        # emit() already runs under the handler lock (Handler.handle)
        self._entries.append(entry)

    def entries(self, limit: Optional[int] = None) -> List[ConsoleLogEntry]:
        self.acquire()
        try:
            items = list(self._entries)
        finally:
            self.release()
        if limit is not None:
            items = items[-limit:] if limit > 0 else []
        return items

    def clear(self) -> int:
        self.acquire()
        try:
            count = len(self._entries)
            self._entries.clear()
        finally:
            self.release()
        return count

    def __len__(self) -> int:
        self.acquire()
        try:
            return len(self._entries)
        finally:
            self.release()
