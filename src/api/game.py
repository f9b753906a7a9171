"""Game API endpoints (development host)."""

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.schemas import (
    BlockDestroyedRequest,
    ErrorResponse,
    InventoryResponse,
    MainSlotInfo,
    PlacementResponse,
    SlotInfo,
    StackLimitsResponse,
)
from src.core.blocks.registry import UnknownBlockTypeError
from src.core.inventory.messages import format_status
from src.core.inventory.models import ItemStack
from src.core.logging import get_logger
from src.modules.inventory.module import InventoryModule
from src.services.host.memory import InMemoryHost
from src.services.inventory_service import InventoryService

logger = get_logger(__name__)

router = APIRouter(prefix="/game", tags=["game"])


def get_host(request: Request) -> InMemoryHost:
    """호스트 인스턴스 반환 (의존성 주입)"""
    host: InMemoryHost = request.app.state.host
    return host


def get_inventory_module(request: Request) -> InventoryModule:
    """InventoryModule 인스턴스 반환 (의존성 주입)"""
    module: InventoryModule = request.app.state.inventory_module
    return module


def get_inventory_service(
    module: InventoryModule = Depends(get_inventory_module),
) -> InventoryService:
    """활성화된 InventoryService 반환. 비활성이면 503."""
    if module.service is None:
        raise HTTPException(status_code=503, detail="Inventory module is disabled")
    return module.service


def _build_slot_info(host: InMemoryHost, stack: ItemStack) -> SlotInfo:
    return SlotInfo(
        block=host.resolve_block_name(stack.block_id),
        block_id=stack.block_id,
        count=stack.count,
    )


@router.post(
    "/blocks/destroyed",
    response_model=PlacementResponse,
    responses={404: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
def block_destroyed(
    request: BlockDestroyedRequest,
    host: InMemoryHost = Depends(get_host),
    service: InventoryService = Depends(get_inventory_service),
) -> PlacementResponse:
    """
    블록 파괴 시뮬레이션

    파괴된 블록 1개를 플레이어 인벤토리에 배치하고 결과를 반환합니다.
    """
    try:
        block_id = host.resolve_block_id(request.block)
    except UnknownBlockTypeError as e:
        logger.warning("Unknown block in destroy request: %s", request.block)
        raise HTTPException(status_code=404, detail=str(e))

    result = service.handle_block_destroyed(
        request.player_id, request.x, request.y, request.z, block_id
    )
    return PlacementResponse(
        success=result.placed,
        outcome=result.outcome.value,
        block=request.block,
        count=result.count,
        max_stack=result.max_stack,
        hotbar_index=result.hotbar_index,
        grid_point=result.grid_point,
        message=format_status(result, request.block),
    )


@router.get(
    "/inventory/{player_id}",
    response_model=InventoryResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_inventory(
    player_id: str,
    host: InMemoryHost = Depends(get_host),
) -> InventoryResponse:
    """플레이어 인벤토리 조회"""
    if not host.has_player(player_id):
        raise HTTPException(status_code=404, detail=f"Unknown player: {player_id}")

    inventory = host.get_inventory(player_id)
    hotbar = [
        _build_slot_info(host, stack) if stack is not None else None
        for stack in inventory.hotbar
    ]
    main = [
        MainSlotInfo(x=x, y=y, **_build_slot_info(host, stack).model_dump())
        for (x, y), stack in sorted(inventory.main.items(), key=lambda kv: kv[0][::-1])
        if stack is not None
    ]
    return InventoryResponse(player_id=player_id, hotbar=hotbar, main=main)


@router.get(
    "/stack-limits",
    response_model=StackLimitsResponse,
    responses={503: {"model": ErrorResponse}},
)
def get_stack_limits(
    host: InMemoryHost = Depends(get_host),
    service: InventoryService = Depends(get_inventory_service),
) -> StackLimitsResponse:
    """스택 제한 설정 조회"""
    limits = service.limits
    overrides = {
        host.resolve_block_name(block_id): limit
        for block_id, limit in limits.overrides.items()
    }
    return StackLimitsResponse(
        default=limits.default, overrides=overrides, unresolved=limits.unresolved
    )
