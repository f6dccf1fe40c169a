"""Whitelist Locator — 아이템 정의 안에 박힌 탄약 화이트리스트 탐색

탐색 지점 (아이템 properties 기준):
1. Chambers[*]._props.filters[*].Filter   (무기 약실)
2. Cartridges[*]._props.filters[*].Filter (탄창)
3. Slots[*]._props.filters[*].Filter      (일반 슬롯)

모양이 다르거나 없는 가지는 조용히 건너뛴다.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from . import accessor, fields
from .models import WhitelistRef

# (허용 철자, 로그용 이름)
SLOT_COLLECTIONS: tuple[tuple[Sequence[str], str], ...] = (
    (fields.CHAMBERS, "Chambers"),
    (fields.CARTRIDGES, "Cartridges"),
    (fields.SLOTS, "Slots"),
)


def locate_whitelists(record: Any) -> Iterator[WhitelistRef]:
    """아이템 레코드의 모든 화이트리스트를 순서대로 lazily 생성"""
    props = accessor.get_first(record, fields.PROPERTIES)
    if props is None:
        return

    for names, label in SLOT_COLLECTIONS:
        slots = accessor.get_first(props, names)
        if not accessor.is_collection(slots):
            continue
        for i, slot in enumerate(slots):
            if slot is None:
                continue
            slot_props = accessor.get_first(slot, fields.PROPERTIES)
            if slot_props is None:
                continue
            yield from locate_in_filter_groups(slot_props, f"{label}[{i}]")


def locate_in_filter_groups(props: Any, path: str = "") -> Iterator[WhitelistRef]:
    """properties의 filters[*].Filter 컬렉션들"""
    groups = accessor.get_first(props, fields.FILTER_GROUPS)
    if not accessor.is_collection(groups):
        return

    prefix = f"{path}." if path else ""
    for j, entry in enumerate(groups):
        if entry is None:
            continue
        member = accessor.find_first_member(entry, fields.FILTER)
        if member is None:
            continue
        collection = accessor.get(entry, member)
        if not accessor.is_collection(collection):
            continue
        yield WhitelistRef(
            owner=entry,
            member=member,
            collection=collection,
            path=f"{prefix}filters[{j}].{member}",
        )
