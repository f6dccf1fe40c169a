"""Caliber Classifier — 아이템 하나가 탄약인지, 구경이 무엇인지 판정"""

from __future__ import annotations

from typing import Any

from . import accessor, fields
from .models import AmmoClassification, NOT_AMMO


def classify(record: Any) -> AmmoClassification:
    """탄약 판정.

    조건:
    - properties 존재
    - 구경 필드가 비어있지 않음
    - Damage 또는 PenetrationPower 중 하나 이상 존재 (값 0도 존재로 본다)

    데미지 조건은 탄약이 아닌 아이템의 표시용 "Caliber" 텍스트를 걸러낸다.
    """
    props = accessor.get_first(record, fields.PROPERTIES)
    if props is None:
        return NOT_AMMO

    raw_caliber = accessor.get_first(props, fields.CALIBER)
    caliber = str(raw_caliber).strip() if raw_caliber is not None else ""
    if not caliber:
        return NOT_AMMO

    has_damage = accessor.get_first(props, fields.DAMAGE) is not None
    has_penetration = accessor.get_first(props, fields.PENETRATION) is not None
    if not has_damage and not has_penetration:
        return NOT_AMMO

    return AmmoClassification(is_ammo=True, caliber=caliber)
