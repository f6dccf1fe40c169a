"""카탈로그 저장소 — JSON 로드 + 동적 등록

패스 Core는 이 클래스를 모른다. items 매핑만 넘겨받는다.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from .errors import CatalogLoadError

logger = logging.getLogger(__name__)

ID_KEYS = ("_id", "id")


class CatalogStore:
    """
    아이템 정의 저장소.
    레코드는 JSON 그대로의 dict/list 트리로 보관한다 (스키마 가정 없음).
    """

    def __init__(self) -> None:
        self._items: dict[str, Any] = {}

    def load_from_json(self, path: str | Path) -> int:
        """카탈로그 JSON 로드. 반환: 로드된 수량.

        형식:
        - 객체: {item_id: record, ...}
        - 배열: [{"_id": ..., ...}, ...] (_id 또는 id 필수)
        파일이 없으면 경고 후 0. 읽기/해석 실패는 CatalogLoadError.
        """
        path = Path(path)
        if not path.exists():
            logger.warning("Catalog file not found: %s", path)
            return 0

        try:
            with path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogLoadError(f"Failed to read catalog {path}: {e}") from e

        if isinstance(raw, dict):
            entries = list(raw.items())
        elif isinstance(raw, list):
            entries = []
            for record in raw:
                item_id = _record_id(record)
                if item_id is None:
                    logger.warning("Skipping catalog entry without id: %r", record)
                    continue
                entries.append((item_id, record))
        else:
            raise CatalogLoadError(
                f"Catalog {path} must be an object or array, got {type(raw).__name__}"
            )

        for item_id, record in entries:
            self._items[item_id] = record

        logger.info("Loaded %d catalog items from %s", len(entries), path)
        return len(entries)

    def register(self, item_id: str, record: Any) -> None:
        """레코드 등록. 이미 존재하면 경고 로그 후 덮어쓴다."""
        if item_id in self._items:
            logger.warning("Overwriting existing catalog item: %s", item_id)
        self._items[item_id] = record

    def get(self, item_id: str) -> Optional[Any]:
        """O(1) 조회. 없으면 None."""
        return self._items.get(item_id)

    @property
    def items(self) -> dict[str, Any]:
        """가변 핸들. 패스가 이 dict 안의 레코드를 직접 수정한다."""
        return self._items

    def clear(self) -> None:
        self._items.clear()

    def count(self) -> int:
        """등록된 아이템 수."""
        return len(self._items)


def _record_id(record: Any) -> Optional[str]:
    if not isinstance(record, dict):
        return None
    for key in ID_KEYS:
        value = record.get(key)
        if isinstance(value, str) and value:
            return value
    return None
