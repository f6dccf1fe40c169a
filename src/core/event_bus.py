"""EventBus - 호스트 모듈/서비스 간 이벤트 통신 인프라

규칙:
- 서비스/모듈은 다른 모듈을 직접 import하지 않는다
- 이벤트 데이터는 가벼운 값(ID, 카운터)만 전달한다
- 전파 깊이 최대 MAX_DEPTH 단계
- 핸들러 예외는 로그만 남기고 다른 핸들러로 번지지 않는다
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from src.core.logging import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 5  # 한 번의 emit에서 이어지는 전파 최대 깊이


@dataclass
class CatalogEvent:
    """이벤트 데이터 컨테이너

    Args:
        event_type: 이벤트 유형 (예: "catalog_loaded", "ammo_compat_completed")
        data: 이벤트 데이터 (카운터/ID 위주)
        source: 발행한 모듈/서비스 이름
    """

    event_type: str
    data: Dict[str, Any]
    source: str

    # 내부 추적용 (외부에서 설정하지 않음)
    _depth: int = field(default=0, repr=False)


EventHandler = Callable[[CatalogEvent], None]


class EventBus:
    """동기식 이벤트 버스

    사용 패턴:
        bus = EventBus()
        bus.subscribe("ammo_compat_completed", reporter.on_summary)
        bus.emit(CatalogEvent(event_type="ammo_compat_completed", data={...}, source="ammo_compat"))
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._current_depth: int = 0

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        """이벤트 구독 등록"""
        self._handlers[event_type].append(handler)
        logger.debug(f"EventBus 구독: {event_type} → {handler.__qualname__}")

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        """이벤트 구독 해제"""
        try:
            self._handlers[event_type].remove(handler)
        except ValueError:
            logger.warning(f"핸들러 미등록: {event_type} → {handler.__qualname__}")

    def emit(self, event: CatalogEvent) -> None:
        """이벤트 발행. 등록된 핸들러를 동기 호출."""
        if self._current_depth >= MAX_DEPTH:
            logger.warning(
                f"EventBus 전파 깊이 초과 ({MAX_DEPTH}): "
                f"{event.source}:{event.event_type} 무시됨"
            )
            return

        event._depth = self._current_depth
        handlers = list(self._handlers.get(event.event_type, []))
        if not handlers:
            logger.debug(f"EventBus: {event.event_type} 구독자 없음")
            return

        logger.debug(
            f"EventBus 전파: {event.event_type} (source={event.source}, "
            f"depth={self._current_depth}, handlers={len(handlers)})"
        )

        self._current_depth += 1
        try:
            for handler in handlers:
                try:
                    handler(event)
                except Exception:
                    logger.exception(
                        f"EventBus 핸들러 에러: {handler.__qualname__} "
                        f"(event={event.event_type})"
                    )
        finally:
            self._current_depth -= 1

    def clear(self) -> None:
        """모든 구독 해제 (테스트용)"""
        self._handlers.clear()
        self._current_depth = 0

    @property
    def handler_count(self) -> int:
        """등록된 총 핸들러 수"""
        return sum(len(h) for h in self._handlers.values())
