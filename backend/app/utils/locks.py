"""키(예: 테이블명 + 부모 ID) 단위로 임계 구역을 직렬화하는 프로세스 내 잠금 레지스트리입니다."""

import threading
from contextlib import contextmanager
from typing import Dict, Hashable, List


class KeyedLock:
    def __init__(self):
        self._guard = threading.Lock()
        self._entries: Dict[Hashable, List] = {}

    @contextmanager
    def hold(self, key: Hashable):
        with self._guard:
            entry = self._entries.setdefault(key, [threading.Lock(), 0])
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)
