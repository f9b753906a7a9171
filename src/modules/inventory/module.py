"""InventoryModule — 블록 파괴 시 인벤토리 배치 모드

core_blocks에 의존. 활성화 시:
1. 스택 제한 테이블 구성 (해석 실패한 이름은 경고 로그)
2. InventoryService 생성
3. BLOCK_DESTROYED 구독
"""

import logging
from typing import Iterable, List, Optional

from src.core.event_bus import EventBus
from src.core.event_types import EventTypes
from src.core.inventory.models import GridPoint
from src.core.inventory.placement import DEFAULT_GRID_SIZE
from src.core.inventory.stack_limits import (
    DEFAULT_MAX_STACK,
    StackLimitTable,
    build_stack_limits,
)
from src.modules.base import GameModule
from src.services.host.base import HostGateway
from src.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)


class InventoryModule(GameModule):
    """인벤토리 배치 모듈

    의존성: ["core_blocks"]
    """

    def __init__(
        self,
        host: HostGateway,
        event_bus: EventBus,
        limit_entries: Iterable[tuple[str, int]],
        default_max_stack: int = DEFAULT_MAX_STACK,
        grid_size: GridPoint = DEFAULT_GRID_SIZE,
    ) -> None:
        super().__init__()
        self._host = host
        self._bus = event_bus
        self._limit_entries = list(limit_entries)
        self._default_max_stack = default_max_stack
        self._grid_size = grid_size
        self._service: Optional[InventoryService] = None

    @property
    def name(self) -> str:
        return "inventory"

    @property
    def dependencies(self) -> List[str]:
        return ["core_blocks"]

    @property
    def service(self) -> Optional[InventoryService]:
        return self._service

    @property
    def limits(self) -> Optional[StackLimitTable]:
        return self._service.limits if self._service else None

    def on_enable(self) -> None:
        result = build_stack_limits(
            self._limit_entries,
            self._host.resolve_block_id,
            default=self._default_max_stack,
        )
        if result.unresolved:
            logger.warning(
                "Unresolved block types in stack limits: %s",
                ", ".join(result.unresolved),
            )
        logger.info("Loaded %d custom stack sizes", len(result.table))

        self._service = InventoryService(
            self._host, self._bus, result.table, self._grid_size
        )
        self._bus.subscribe(EventTypes.BLOCK_DESTROYED, self._service.on_block_destroyed)

    def on_disable(self) -> None:
        if self._service is not None:
            self._bus.unsubscribe(
                EventTypes.BLOCK_DESTROYED, self._service.on_block_destroyed
            )
            self._service = None

    def retry_unresolved_limits(self) -> list[str]:
        """레지스트리 추가 로드 후 pending 이름 재해석. 반환: 해석된 이름."""
        if self._service is None:
            return []
        resolved = self._service.limits.resolve_pending(self._host.resolve_block_id)
        if resolved:
            logger.info("Resolved deferred stack limits: %s", ", ".join(resolved))
        return resolved
