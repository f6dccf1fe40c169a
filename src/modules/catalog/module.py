"""CatalogModule — 아이템 카탈로그 로드

가장 먼저 활성화되는 기반 모듈. 후처리 모듈은 이 모듈에 의존한다.
"""

import logging
from pathlib import Path

from src.core.catalog.errors import CatalogLoadError
from src.core.catalog.store import CatalogStore
from src.core.event_bus import CatalogEvent, EventBus
from src.core.event_types import EventTypes
from src.modules.base import HostModule

logger = logging.getLogger(__name__)

CATALOG_LOAD_ORDER = 0


class CatalogModule(HostModule):
    """카탈로그 로더 모듈

    담당:
    - on_enable 시 JSON 파일에서 CatalogStore 채우기
    - 로드 완료 후 catalog_loaded 이벤트 발행

    의존성: []
    """

    def __init__(
        self, store: CatalogStore, path: str | Path, event_bus: EventBus
    ) -> None:
        super().__init__()
        self._store = store
        self._path = Path(path)
        self._bus = event_bus

    @property
    def name(self) -> str:
        return "catalog"

    @property
    def load_order(self) -> int:
        return CATALOG_LOAD_ORDER

    @property
    def store(self) -> CatalogStore:
        return self._store

    def on_enable(self) -> None:
        """카탈로그 로드. 실패하면 빈 카탈로그로 계속한다."""
        try:
            self._store.load_from_json(self._path)
        except CatalogLoadError:
            logger.exception("Catalog load failed, continuing with empty catalog")
            self._store.clear()

        self._bus.emit(
            CatalogEvent(
                event_type=EventTypes.CATALOG_LOADED,
                data={"count": self._store.count(), "path": str(self._path)},
                source=self.name,
            )
        )

    def on_disable(self) -> None:
        pass
