"""API request/response schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str
    catalog_items: int = 0


class PassSummaryResponse(BaseModel):
    """탄약 호환 패스 요약. EventBus 페이로드와 같은 camelCase 필드로 직렬화."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(..., description="completed | empty_catalog | no_ammo | failed")
    whitelists_touched: int = Field(
        0, alias="whitelistsTouched", description="식별자가 추가된 화이트리스트 수"
    )
    identifiers_added: int = Field(
        0, alias="identifiersAdded", description="추가된 식별자 총합"
    )
    known_ammo_count: int = Field(
        0, alias="knownAmmoCount", description="색인된 탄약 수"
    )
    error: Optional[str] = None
