"""카탈로그 도메인 모델 (저장소/호스트 무관)"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .errors import IdConversionError


def fold(value: str) -> str:
    """대소문자 무시 비교용 키"""
    return value.casefold()


@dataclass(frozen=True)
class ItemId:
    """타입이 있는 아이템 식별자 래퍼. str()이 곧 식별자."""

    value: str

    def __str__(self) -> str:
        return self.value


class IdKind(str, Enum):
    PLAIN = "plain"  # 문자열 그대로 저장
    WRAPPED = "wrapped"  # ItemId 등 래퍼 객체로 저장


@dataclass(frozen=True)
class IdRepresentation:
    """컬렉션 하나가 식별자를 저장하는 방식.

    컬렉션마다 한 번 결정하고, 이후 모든 추가에 동일하게 사용한다.
    """

    kind: IdKind = IdKind.PLAIN
    wrapper: type = ItemId

    def to_element(self, item_id: str) -> Any:
        if self.kind is IdKind.PLAIN:
            return item_id
        try:
            return self.wrapper(item_id)
        except (TypeError, ValueError) as e:
            raise IdConversionError(item_id, self.wrapper) from e


PLAIN_IDS = IdRepresentation(IdKind.PLAIN)


@dataclass(frozen=True)
class AmmoClassification:
    """Classifier 판정 결과"""

    is_ammo: bool
    caliber: Optional[str] = None


NOT_AMMO = AmmoClassification(is_ammo=False)


class AmmoIndex:
    """
    탄약 색인.
    ammo_to_caliber / caliber_to_ammo 양방향 일관성을 유지한다.
    식별자와 구경은 대소문자 무시, 표시용 철자는 처음 본 것을 유지.
    """

    def __init__(self) -> None:
        self._caliber_by_ammo: dict[str, str] = {}  # folded id → folded caliber
        self._ammo_by_caliber: dict[str, dict[str, str]] = {}  # folded caliber → {folded id: id}
        self._caliber_names: dict[str, str] = {}  # folded caliber → 표시용 철자

    def add(self, item_id: str, caliber: str) -> None:
        """탄약 등록. 이미 다른 구경에 있으면 새 구경으로 옮긴다."""
        id_key = fold(item_id)
        cal_key = fold(caliber)

        previous = self._caliber_by_ammo.get(id_key)
        if previous is not None and previous != cal_key:
            members = self._ammo_by_caliber[previous]
            members.pop(id_key, None)
            if not members:
                del self._ammo_by_caliber[previous]
                del self._caliber_names[previous]

        self._caliber_by_ammo[id_key] = cal_key
        self._caliber_names.setdefault(cal_key, caliber)
        self._ammo_by_caliber.setdefault(cal_key, {}).setdefault(id_key, item_id)

    def caliber_of(self, item_id: str) -> Optional[str]:
        """탄약 식별자의 구경 (folded). 탄약이 아니면 None."""
        return self._caliber_by_ammo.get(fold(item_id))

    def ammo_of(self, caliber: str) -> list[str]:
        """해당 구경의 모든 탄약 식별자 (원래 철자)"""
        return list(self._ammo_by_caliber.get(fold(caliber), {}).values())

    @property
    def ammo_to_caliber(self) -> dict[str, str]:
        return {
            ids[id_key]: self._caliber_names[cal_key]
            for cal_key, ids in self._ammo_by_caliber.items()
            for id_key in ids
        }

    @property
    def caliber_to_ammo(self) -> dict[str, set[str]]:
        return {
            self._caliber_names[cal_key]: set(ids.values())
            for cal_key, ids in self._ammo_by_caliber.items()
        }

    def is_empty(self) -> bool:
        return not self._caliber_by_ammo

    def __len__(self) -> int:
        return len(self._caliber_by_ammo)

    def __contains__(self, item_id: object) -> bool:
        return isinstance(item_id, str) and fold(item_id) in self._caliber_by_ammo


@dataclass
class WhitelistRef:
    """찾아낸 화이트리스트 하나에 대한 핸들.

    owner: Filter 필드를 가진 필터 그룹 원소
    member: owner 안에서 컬렉션이 실제로 저장된 이름
    """

    owner: Any
    member: str
    collection: Any
    path: str = ""


class PassStatus(str, Enum):
    COMPLETED = "completed"
    EMPTY_CATALOG = "empty_catalog"
    NO_AMMO = "no_ammo"
    FAILED = "failed"


@dataclass
class PassSummary:
    """패스 결과 카운터. 생성 후 읽기 전용으로 취급."""

    status: PassStatus = PassStatus.COMPLETED
    whitelists_touched: int = 0
    identifiers_added: int = 0
    known_ammo_count: int = 0
    error: Optional[str] = field(default=None)

    @property
    def failed(self) -> bool:
        return self.status is PassStatus.FAILED

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "whitelistsTouched": self.whitelists_touched,
            "identifiersAdded": self.identifiers_added,
            "knownAmmoCount": self.known_ammo_count,
            "error": self.error,
        }
