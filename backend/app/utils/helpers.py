"""요청 파라미터 정규화 관련 공용 유틸리티 헬퍼입니다."""

from typing import Any, Iterable, List


def split_ids(raw: str | None) -> List[str]:
    """Split a ``"1,2,3"`` query value into its parts."""
    if not raw:
        return []
    return [part.strip() for part in str(raw).split(",") if part.strip()]


def positive_ids(ids: Any) -> List[int]:
    """Keep only identifiers that parse to an integer strictly greater than zero.

    Accepts a single value or an iterable. Anything else (``0``, negatives,
    blanks, non-numeric strings) is dropped without error.
    """
    if ids is None:
        return []
    if isinstance(ids, (str, bytes, int)) or not isinstance(ids, Iterable):
        ids = [ids]
    result: List[int] = []
    for raw in ids:
        if isinstance(raw, bool):
            continue
        try:
            value = int(str(raw).strip())
        except (TypeError, ValueError):
            continue
        if value > 0:
            result.append(value)
    return result
