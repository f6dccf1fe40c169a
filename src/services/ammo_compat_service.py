"""탄약 호환 Service — 색인 → 화이트리스트 탐색/확장 순서 제어, EventBus 보고

architecture: Service → Core 허용, 결과 보고는 EventBus 경유
"""

from typing import Any, Callable, Mapping, Optional, Union

from src.core.catalog.expander import expand
from src.core.catalog.indexer import build_index
from src.core.catalog.locator import locate_whitelists
from src.core.catalog.models import (
    IdRepresentation,
    PLAIN_IDS,
    PassStatus,
    PassSummary,
)
from src.core.event_bus import CatalogEvent, EventBus
from src.core.event_types import EventTypes
from src.core.logging import get_logger

logger = get_logger(__name__)

LOG_TAG = "[AmmoCompat]"

Catalog = Mapping[str, Any]
CatalogSource = Union[Catalog, Callable[[], Optional[Catalog]], None]


class AmmoCompatService:
    """탄약 화이트리스트 자동 확장 패스

    필터에 탄약이 하나라도 있으면 그 구경(들)을 추론하고,
    같은 구경의 모든 탄약을 같은 필터에 추가한다.

    catalog: 매핑 그대로, 또는 run() 시점에 매핑을 돌려주는 callable.
    호출자는 run() 동안 카탈로그에 대한 다른 접근이 없음을 보장한다.
    """

    def __init__(
        self,
        catalog: CatalogSource,
        event_bus: Optional[EventBus] = None,
        default_representation: IdRepresentation = PLAIN_IDS,
    ):
        self._catalog = catalog
        self._bus = event_bus
        self._default_representation = default_representation
        self._last_summary: Optional[PassSummary] = None

    @property
    def last_summary(self) -> Optional[PassSummary]:
        return self._last_summary

    def run(self) -> PassSummary:
        """패스 1회 실행. 예외를 밖으로 던지지 않는다.

        예상 밖 예외는 실패 요약 하나로 변환. 이미 적용된 변경은 되돌리지 않는다.
        """
        try:
            summary = self._run()
        except Exception as e:
            logger.exception(f"{LOG_TAG} Failed to apply auto ammo compatibility.")
            summary = PassSummary(status=PassStatus.FAILED, error=str(e) or type(e).__name__)
            self._emit(EventTypes.AMMO_COMPAT_FAILED, summary)

        self._last_summary = summary
        return summary

    def _resolve_catalog(self) -> Optional[Catalog]:
        if callable(self._catalog):
            return self._catalog()
        return self._catalog

    def _run(self) -> PassSummary:
        catalog = self._resolve_catalog()
        if not catalog:
            logger.info(f"{LOG_TAG} Catalog is empty - nothing to patch.")
            summary = PassSummary(status=PassStatus.EMPTY_CATALOG)
            self._emit(EventTypes.AMMO_COMPAT_SKIPPED, summary)
            return summary

        index = build_index(catalog)
        if index.is_empty():
            logger.warning(
                f"{LOG_TAG} No ammo templates with Caliber found - nothing to patch."
            )
            summary = PassSummary(status=PassStatus.NO_AMMO)
            self._emit(EventTypes.AMMO_COMPAT_SKIPPED, summary)
            return summary

        touched = 0
        added_total = 0
        for item_id, record in catalog.items():
            if record is None:
                continue
            for whitelist in locate_whitelists(record):
                added = expand(whitelist, index, self._default_representation)
                if added > 0:
                    touched += 1
                    added_total += added
                    logger.debug(f"{LOG_TAG} {item_id} {whitelist.path}: +{added}")

        summary = PassSummary(
            status=PassStatus.COMPLETED,
            whitelists_touched=touched,
            identifiers_added=added_total,
            known_ammo_count=len(index),
        )
        logger.info(
            f"{LOG_TAG} Done. Filters touched: {touched}, "
            f"Ammo tpl added: {added_total}, Known ammo templates: {len(index)}"
        )
        self._emit(EventTypes.AMMO_COMPAT_COMPLETED, summary)
        return summary

    def _emit(self, event_type: str, summary: PassSummary) -> None:
        if self._bus is None:
            return
        self._bus.emit(
            CatalogEvent(
                event_type=event_type,
                data=summary.to_dict(),
                source="ammo_compat",
            )
        )
