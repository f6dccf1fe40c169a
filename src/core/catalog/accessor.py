"""구조 접근자 — 형태를 모르는 레코드에서 논리 필드명으로 값 조회

규칙:
- 직접 멤버만 본다 (중첩 탐색은 호출자가 명시적으로 체인)
- 정확히 일치 → 대소문자 무시 일치 순서
- 없는 필드는 None. 예외를 던지지 않는다
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional, Sequence


_MISSING = object()


def _is_attribute(record: Any, name: str) -> bool:
    """dunder/메서드를 제외한 읽을 수 있는 속성인지.

    인스턴스 속성, slots, 클래스 속성, property, namedtuple 필드 등
    getattr로 읽히는 모든 descriptor를 포함한다.
    """
    if name.startswith("__"):
        return False
    value = getattr(record, name, _MISSING)
    return value is not _MISSING and not callable(value)


def find_member(record: Any, name: str) -> Optional[str]:
    """레코드에 실제로 존재하는 멤버 이름. 없으면 None."""
    if record is None:
        return None
    folded = name.casefold()

    if isinstance(record, Mapping):
        if name in record:
            return name
        for key in record.keys():
            if isinstance(key, str) and key.casefold() == folded:
                return key
        return None

    if _is_attribute(record, name):
        return name
    for candidate in dir(record):
        if candidate.casefold() == folded and _is_attribute(record, candidate):
            return candidate
    return None


def _read(record: Any, member: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(member)
    return getattr(record, member, None)


def get(record: Any, name: str) -> Any:
    """논리 필드명으로 값 조회. 없거나 None이면 None."""
    member = find_member(record, name)
    if member is None:
        return None
    return _read(record, member)


def get_first(record: Any, names: Sequence[str]) -> Any:
    """허용 철자를 순서대로 시도. 처음 찾은 값 반환."""
    for name in names:
        value = get(record, name)
        if value is not None:
            return value
    return None


def find_first_member(record: Any, names: Sequence[str]) -> Optional[str]:
    """get_first와 같은 순서로, 값이 있는 멤버의 실제 이름 반환"""
    for name in names:
        member = find_member(record, name)
        if member is not None and _read(record, member) is not None:
            return member
    return None


def set_member(record: Any, member: str, value: Any) -> None:
    """find_member로 얻은 실제 멤버 이름에 값 기록"""
    if isinstance(record, Mapping):
        record[member] = value  # type: ignore[index]
    else:
        setattr(record, member, value)


def is_collection(value: Any) -> bool:
    """문자열/바이트/매핑이 아닌 iterable"""
    if value is None or isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Iterable)
