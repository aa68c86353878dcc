"""프로세스 로컬 TTL 메모리 캐시 유틸리티입니다.

여러 서버 인스턴스 간에 공유되지 않으며, 만료된 항목은 조회 시점에만 제거된다.
"""

import time
from threading import Lock
from typing import Any, Dict, Optional, Tuple

DEFAULT_TTL_SECONDS = 300


class TTLCache:
    def __init__(self, clock=time.monotonic):
        self._store: Dict[str, Tuple[Any, float, float]] = {}
        self._lock = Lock()
        self._clock = clock

    def set(self, key: str, value: Any, ttl: float = DEFAULT_TTL_SECONDS) -> None:
        with self._lock:
            self._store[key] = (value, self._clock(), float(ttl))

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            item = self._store.get(key)
            if item is None:
                return None
            value, stored_at, ttl = item
            if self._clock() - stored_at > ttl:
                del self._store[key]
                return None
            return value

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._store.pop(key, None) is not None

    def delete_prefix(self, prefix: str) -> int:
        with self._lock:
            keys = [key for key in self._store if key.startswith(prefix)]
            for key in keys:
                del self._store[key]
            return len(keys)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._store)


def create_cache_key(prefix: str, params: Dict[str, Any]) -> str:
    parts = "|".join(f"{key}:{params[key]}" for key in sorted(params))
    return f"{prefix}:{parts}"


cache = TTLCache()
