"""호스트 모듈 기반 인터페이스"""

from abc import ABC, abstractmethod
from typing import List


class HostModule(ABC):
    """호스트 시작 순서에 끼워 넣는 모듈의 기반 인터페이스

    규칙:
    - 모듈은 다른 모듈을 직접 import하지 않는다
    - 모듈 간 통신은 EventBus 또는 생성자로 주입된 Core 객체를 경유한다
    - load_order가 낮은 모듈부터 활성화된다
    """

    _enabled: bool

    # 기본 로드 순서. 카탈로그 로더 = 0, 후처리 패스는 그 뒤.
    DEFAULT_LOAD_ORDER = 100

    def __init__(self) -> None:
        self._enabled = False

    @property
    @abstractmethod
    def name(self) -> str:
        """모듈 고유 이름 (예: 'catalog', 'ammo_compat')"""
        ...

    @property
    def dependencies(self) -> List[str]:
        """이 모듈이 의존하는 다른 모듈 이름 목록

        기본값은 빈 리스트 (의존성 없음).
        """
        return []

    @property
    def load_order(self) -> int:
        return self.DEFAULT_LOAD_ORDER

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @abstractmethod
    def on_enable(self) -> None:
        """모듈 활성화 시 초기화 작업"""
        ...

    @abstractmethod
    def on_disable(self) -> None:
        """모듈 비활성화 시 정리 작업"""
        ...
