"""AmmoCompatModule — 카탈로그 로드 직후 탄약 화이트리스트 확장 패스 실행"""

import logging
from typing import List, Optional

from src.core.catalog.models import PassSummary
from src.modules.base import HostModule
from src.services.ammo_compat_service import AmmoCompatService

logger = logging.getLogger(__name__)

# 카탈로그 로더 이후 +25
AMMO_COMPAT_LOAD_ORDER = 25


class AmmoCompatModule(HostModule):
    """탄약 호환 후처리 모듈

    담당:
    - 활성화 시 패스 1회 실행
    - 마지막 요약 보관 (API 조회용)

    의존성: ["catalog"]
    """

    def __init__(self, service: AmmoCompatService, run_on_enable: bool = True) -> None:
        super().__init__()
        self._service = service
        self._run_on_enable = run_on_enable

    @property
    def name(self) -> str:
        return "ammo_compat"

    @property
    def dependencies(self) -> List[str]:
        return ["catalog"]

    @property
    def load_order(self) -> int:
        return AMMO_COMPAT_LOAD_ORDER

    @property
    def last_summary(self) -> Optional[PassSummary]:
        return self._service.last_summary

    def on_enable(self) -> None:
        if not self._run_on_enable:
            logger.info("Ammo compat pass disabled by configuration")
            return
        self._service.run()

    def on_disable(self) -> None:
        pass
