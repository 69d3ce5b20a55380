"""본문 리비전 중복 제거에 쓰이는 콘텐츠 지문(fingerprint) 함수입니다."""

import hashlib


def fingerprint(content: str | None, html: str | None) -> str:
    """Return the lowercase hex SHA-256 of ``content + html``.

    The two parts are joined without a separator, so the order matters and
    ``fingerprint("a", "b") == fingerprint("ab", "")``.
    """
    payload = (content or "") + (html or "")
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
