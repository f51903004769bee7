"""In-memory memo store for schedule and strength-of-schedule results."""

from __future__ import annotations

from typing import Any, Dict, Hashable, Optional


class ScheduleCache:
    """Plain key/value store owned by a single :class:`ScheduleService`.

    Writes for a key are idempotent (same inputs, same value), so concurrent
    callers need no locking; the last writer wins.
    """

    def __init__(self) -> None:
        self._entries: Dict[Hashable, Any] = {}

    def get(self, key: Hashable) -> Optional[Any]:
        return self._entries.get(key)

    def set(self, key: Hashable, value: Any) -> Any:
        self._entries[key] = value
        return value

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
