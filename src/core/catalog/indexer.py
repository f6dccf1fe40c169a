"""Catalog Indexer — 카탈로그 전체를 한 번 훑어 탄약 색인 생성"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .classifier import classify
from .models import AmmoIndex

logger = logging.getLogger(__name__)


def build_index(catalog: Optional[Mapping[str, Any]]) -> AmmoIndex:
    """ammo id → caliber, caliber → ammo ids 색인 생성.

    카탈로그가 비었거나 탄약이 하나도 없으면 빈 색인 반환.
    """
    index = AmmoIndex()
    if not catalog:
        return index

    for item_id, record in catalog.items():
        if record is None or not isinstance(item_id, str):
            continue
        result = classify(record)
        if result.is_ammo and result.caliber:
            index.add(item_id, result.caliber)

    logger.debug(
        "Indexed %d ammo across %d calibers", len(index), len(index.caliber_to_ammo)
    )
    return index
