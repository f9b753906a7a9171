"""FastAPI application entrypoint (development host)."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.api.game import router as game_router
from src.api.health import router as health_router
from src.config import settings
from src.core.inventory.stack_limits import load_limit_entries
from src.core.logging import get_logger, setup_logging
from src.modules.core_blocks.module import CoreBlocksModule
from src.modules.inventory.module import InventoryModule
from src.modules.module_manager import ModuleManager
from src.services.host.memory import InMemoryHost

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def build_modules(host: InMemoryHost, manager: ModuleManager) -> InventoryModule:
    """core_blocks + inventory 모듈 등록. 반환: InventoryModule"""
    manager.register(CoreBlocksModule(host.registry, settings.CORE_BLOCKS_PATH))

    inventory_module = InventoryModule(
        host=host,
        event_bus=manager.event_bus,
        limit_entries=load_limit_entries(settings.STACK_LIMITS_PATH),
        default_max_stack=settings.DEFAULT_MAX_STACK,
        grid_size=(settings.MAIN_GRID_WIDTH, settings.MAIN_GRID_HEIGHT),
    )
    manager.register(inventory_module)
    return inventory_module


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing host...")
    host = InMemoryHost(hotbar_size=settings.HOTBAR_SIZE)
    manager = ModuleManager()
    inventory_module = build_modules(host, manager)

    # 등록 순서 = 의존성 순서 (core_blocks → inventory)
    failed = manager.enable_all()
    if failed:
        logger.error("Modules failed to enable: %s", ", ".join(failed))

    app.state.host = host
    app.state.module_manager = manager
    app.state.inventory_module = inventory_module
    logger.info("Host initialized.")

    yield

    # 종료 시 정리 (의존 모듈부터 cascade)
    logger.info("Shutting down...")
    manager.disable("core_blocks")


app = FastAPI(title="Block Drop Inventory", lifespan=lifespan)

app.include_router(health_router)
app.include_router(game_router)
