"""API request/response schemas."""

from typing import Optional

from pydantic import BaseModel, Field


# === Request Schemas ===


class BlockDestroyedRequest(BaseModel):
    """블록 파괴 이벤트 (개발용 호스트 시뮬레이션)"""

    player_id: str = Field(..., min_length=1, max_length=50, description="플레이어 ID")
    x: int = 0
    y: int = 0
    z: int = 0
    block: str = Field(..., min_length=1, description="블록 이름 (예: Stone)")


# === Response Schemas ===


class PlacementResponse(BaseModel):
    """배치 결과"""

    success: bool
    outcome: str
    block: str
    count: int
    max_stack: int
    hotbar_index: Optional[int] = None
    grid_point: Optional[tuple[int, int]] = None
    message: str


class SlotInfo(BaseModel):
    """슬롯 하나의 내용"""

    block: str
    block_id: int
    count: int


class MainSlotInfo(SlotInfo):
    x: int
    y: int


class InventoryResponse(BaseModel):
    """플레이어 인벤토리"""

    player_id: str
    hotbar: list[Optional[SlotInfo]] = []
    main: list[MainSlotInfo] = []


class StackLimitsResponse(BaseModel):
    """스택 제한 설정"""

    default: int
    overrides: dict[str, int] = {}
    unresolved: list[str] = []


class ErrorResponse(BaseModel):
    """에러 응답"""

    success: bool = False
    error: str
    detail: Optional[str] = None
