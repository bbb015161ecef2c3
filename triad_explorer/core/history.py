from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Deque, List


class ActivityKind(str, Enum):
    MOUNTED = "mounted"
    RESIZED = "resized"
    DEPTH_CHANGED = "depth_changed"
    DEPTH_LIMIT = "depth_limit"
    OTHER = "other"


@dataclass(frozen=True)
class ExplorerActivity:
    kind: ActivityKind
    message: str
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self) -> str:
        return f"[{self.timestamp:%H:%M:%S}] {self.message}"


class ActivityLog:
    """Recent explorer events, oldest dropped once ``max_history`` is reached."""

    def __init__(self, max_history: int = 50) -> None:
        self.max_history = max_history
        self._entries: Deque[ExplorerActivity] = deque(maxlen=max_history)
        self._lock = threading.Lock()

    def add(self, activity: ExplorerActivity) -> None:
        with self._lock:
            self._entries.append(activity)

    def record(self, kind: ActivityKind, message: str) -> ExplorerActivity:
        activity = ExplorerActivity(kind, message)
        self.add(activity)
        return activity

    def recent(self) -> List[ExplorerActivity]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
