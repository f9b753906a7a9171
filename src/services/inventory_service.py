"""인벤토리 Service — 배치 정책 Core ↔ 호스트 연결, EventBus 통신

Core(place_item)는 순수 함수. 이 Service가 경계 어댑터:
- 호스트 인벤토리에 결과 커밋
- 성공 시 알림 1회 + 메시지 1회, 오버플로우 시 메시지 1회
- 결과 이벤트 발행 (ID만)
"""

from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes
from src.core.inventory.messages import format_status
from src.core.inventory.models import GridPoint, PlacementResult
from src.core.inventory.placement import DEFAULT_GRID_SIZE, place_item
from src.core.inventory.stack_limits import StackLimitTable
from src.core.logging import get_logger
from src.services.host.base import HostGateway

logger = get_logger(__name__)


class InventoryService:
    """블록 파괴 → 인벤토리 배치"""

    SOURCE = "inventory_service"

    def __init__(
        self,
        host: HostGateway,
        event_bus: EventBus,
        limits: StackLimitTable,
        grid_size: GridPoint = DEFAULT_GRID_SIZE,
    ):
        self._host = host
        self._bus = event_bus
        self._limits = limits
        self._grid_size = grid_size

    @property
    def limits(self) -> StackLimitTable:
        return self._limits

    def handle_block_destroyed(
        self, player_id: str, x: int, y: int, z: int, block_id: int
    ) -> PlacementResult:
        """파괴된 블록 1개를 플레이어 인벤토리에 배치.

        월드 좌표는 로그 용도로만 받는다. 오버플로우는 예외 없이 메시지로 끝난다.
        """
        try:
            block_name = self._host.resolve_block_name(block_id)
        except LookupError:
            logger.warning("Unknown block id %d destroyed by %s", block_id, player_id)
            block_name = f"#{block_id}"
        inventory = self._host.get_inventory(player_id)

        updated, result = place_item(inventory, block_id, self._limits, self._grid_size)
        message = format_status(result, block_name)

        if result.placed:
            inventory.assign(updated)
            self._host.notify_inventory_changed(player_id)
            self._host.send_message(player_id, message)
            logger.debug(
                "Placed %s for %s at (%d, %d, %d): %s %d/%d",
                block_name,
                player_id,
                x,
                y,
                z,
                result.outcome.value,
                result.count,
                result.max_stack,
            )
            self._emit(EventTypes.ITEM_PICKED_UP, player_id, result)
        else:
            self._host.send_message(player_id, message)
            logger.info("Inventory full for %s, %s lost", player_id, block_name)
            self._emit(EventTypes.ITEM_LOST, player_id, result)

        return result

    def on_block_destroyed(self, event: GameEvent) -> None:
        """EventBus 핸들러: BLOCK_DESTROYED"""
        data = event.data
        self.handle_block_destroyed(
            player_id=data["player_id"],
            x=data.get("x", 0),
            y=data.get("y", 0),
            z=data.get("z", 0),
            block_id=data["block_id"],
        )

    def _emit(self, event_type: str, player_id: str, result: PlacementResult) -> None:
        self._bus.emit(
            GameEvent(
                event_type=event_type,
                data={
                    "player_id": player_id,
                    "block_id": result.block_id,
                    "outcome": result.outcome.value,
                    "count": result.count,
                },
                source=self.SOURCE,
            )
        )
