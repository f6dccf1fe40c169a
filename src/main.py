"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.api.ammo_compat import router as ammo_compat_router
from src.api.health import router as health_router
from src.config import settings
from src.core.catalog.store import CatalogStore
from src.core.logging import get_logger, setup_logging
from src.modules.ammo_compat.module import AmmoCompatModule
from src.modules.catalog.module import CatalogModule
from src.modules.module_manager import ModuleManager
from src.services.ammo_compat_service import AmmoCompatService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def build_module_manager(store: CatalogStore) -> tuple[ModuleManager, AmmoCompatModule]:
    """카탈로그 로더 + 탄약 호환 모듈 등록"""
    manager = ModuleManager()

    catalog_module = CatalogModule(store, settings.CATALOG_PATH, manager.event_bus)
    ammo_service = AmmoCompatService(lambda: store.items, manager.event_bus)
    ammo_module = AmmoCompatModule(
        ammo_service, run_on_enable=settings.AMMO_COMPAT_ENABLED
    )

    manager.register(catalog_module)
    manager.register(ammo_module)
    return manager, ammo_module


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Loading catalog from {settings.CATALOG_PATH}...")
    store = CatalogStore()
    manager, ammo_module = build_module_manager(store)

    # 카탈로그 로드 → 탄약 호환 패스 (load_order 순)
    enabled = manager.enable_all()
    logger.info(f"Modules enabled: {enabled}")

    app.state.catalog_store = store
    app.state.module_manager = manager
    app.state.ammo_compat_module = ammo_module

    yield

    logger.info("Shutting down...")
    manager.disable_all()
    store.clear()


app = FastAPI(title="Ammo Compat", lifespan=lifespan)

app.include_router(health_router)
app.include_router(ammo_compat_router)
