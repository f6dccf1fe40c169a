"""Whitelist Expander — 기존 항목에서 구경을 추론해 같은 구경 탄약 전부를 추가

규칙:
- 기존 항목은 순서/내용 그대로 유지 (append only)
- 비어있는 화이트리스트는 추론 근거가 없으므로 건드리지 않는다
- 알려진 탄약이 하나도 없으면 탄약 화이트리스트가 아니다 → 건드리지 않는다
- 여러 구경이 추론되면 합집합
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence, MutableSet
from typing import Any, Iterable

from . import accessor
from .models import (
    AmmoIndex,
    IdKind,
    IdRepresentation,
    PLAIN_IDS,
    WhitelistRef,
    fold,
)

logger = logging.getLogger(__name__)


def read_ids(collection: Iterable[Any]) -> set[str]:
    """컬렉션의 식별자 집합 (folded). None/공백 원소는 무시."""
    ids: set[str] = set()
    for element in collection:
        if element is None:
            continue
        text = str(element).strip()
        if text:
            ids.add(fold(text))
    return ids


def resolve_representation(
    collection: Iterable[Any], default: IdRepresentation = PLAIN_IDS
) -> IdRepresentation:
    """기존 원소 하나를 샘플링해 저장 방식 결정. 샘플이 없으면 default."""
    for element in collection:
        if element is None:
            continue
        if isinstance(element, str):
            return PLAIN_IDS
        return IdRepresentation(IdKind.WRAPPED, type(element))
    return default


def add_id(whitelist: WhitelistRef, element: Any) -> None:
    """컬렉션 타입에 맞게 원소 하나 추가.

    tuple/frozenset 같은 불변 컬렉션은 새로 만들어 owner에 다시 기록한다.
    """
    collection = whitelist.collection
    if isinstance(collection, MutableSequence):
        collection.append(element)
    elif isinstance(collection, MutableSet):
        collection.add(element)
    elif isinstance(collection, tuple):
        whitelist.collection = collection + (element,)
        accessor.set_member(whitelist.owner, whitelist.member, whitelist.collection)
    elif isinstance(collection, frozenset):
        whitelist.collection = collection | {element}
        accessor.set_member(whitelist.owner, whitelist.member, whitelist.collection)
    elif callable(getattr(collection, "append", None)):
        collection.append(element)
    elif callable(getattr(collection, "add", None)):
        collection.add(element)
    else:
        raise TypeError(
            f"Unsupported whitelist collection at {whitelist.path or whitelist.member}: "
            f"{type(collection).__name__}"
        )


def expand(
    whitelist: WhitelistRef,
    index: AmmoIndex,
    default: IdRepresentation = PLAIN_IDS,
) -> int:
    """화이트리스트 확장. 반환: 추가된 식별자 수 (0 = 변경 없음)."""
    existing = read_ids(whitelist.collection)
    if not existing:
        return 0

    implied_calibers = {
        caliber
        for caliber in (index.caliber_of(item_id) for item_id in existing)
        if caliber
    }
    if not implied_calibers:
        return 0

    to_add: dict[str, str] = {}
    for caliber in implied_calibers:
        for ammo_id in index.ammo_of(caliber):
            to_add.setdefault(fold(ammo_id), ammo_id)

    missing = [ammo_id for key, ammo_id in to_add.items() if key not in existing]
    if not missing:
        return 0

    representation = resolve_representation(whitelist.collection, default)
    for ammo_id in missing:
        add_id(whitelist, representation.to_element(ammo_id))

    logger.debug(
        "Expanded %s: +%d (calibers=%s)",
        whitelist.path or whitelist.member,
        len(missing),
        sorted(implied_calibers),
    )
    return len(missing)
