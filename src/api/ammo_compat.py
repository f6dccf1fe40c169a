"""Ammo compat pass summary endpoint."""

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.schemas import PassSummaryResponse
from src.modules.ammo_compat.module import AmmoCompatModule

router = APIRouter(prefix="/ammo-compat", tags=["ammo-compat"])


def get_ammo_compat_module(request: Request) -> AmmoCompatModule:
    """AmmoCompatModule 인스턴스 반환 (의존성 주입용)"""
    module = getattr(request.app.state, "ammo_compat_module", None)
    if module is None:
        raise HTTPException(status_code=503, detail="Ammo compat module not initialized")
    return module


@router.get("/summary", response_model=PassSummaryResponse)
def get_summary(
    module: AmmoCompatModule = Depends(get_ammo_compat_module),
) -> PassSummaryResponse:
    """마지막 패스 요약. 아직 실행 전이면 404."""
    summary = module.last_summary
    if summary is None:
        raise HTTPException(status_code=404, detail="Ammo compat pass has not run")
    return PassSummaryResponse.model_validate(summary.to_dict())
