"""인벤토리 도메인 모델 (호스트 무관)"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterator, Optional

GridPoint = tuple[int, int]  # 메인 인벤토리 좌표 (x, y)


class ItemClass(str, Enum):
    BLOCK = "block"


@dataclass(frozen=True)
class ItemStack:
    """한 슬롯을 차지하는 동일 아이템 묶음. 불변.

    수량 변경은 새 ItemStack으로 교체한다.
    """

    block_id: int
    count: int
    item_class: ItemClass = ItemClass.BLOCK

    def is_block(self, block_id: int) -> bool:
        return self.item_class == ItemClass.BLOCK and self.block_id == block_id

    def incremented(self) -> ItemStack:
        return replace(self, count=self.count + 1)


@dataclass
class Inventory:
    """플레이어 인벤토리. 실제 소유자는 호스트 엔진.

    hotbar: 고정 길이 슬롯 목록 (None = 빈 슬롯)
    main: 좌표 → 스택 희소 맵. 키 부재 또는 None 값 = 빈 칸
    """

    hotbar: list[Optional[ItemStack]]
    main: dict[GridPoint, Optional[ItemStack]] = field(default_factory=dict)

    @classmethod
    def empty(cls, hotbar_size: int) -> Inventory:
        if hotbar_size < 1:
            raise ValueError(f"hotbar_size must be >= 1, got {hotbar_size}")
        return cls(hotbar=[None] * hotbar_size)

    def copy(self) -> Inventory:
        """독립 사본. ItemStack은 불변이므로 공유해도 안전."""
        return Inventory(hotbar=list(self.hotbar), main=dict(self.main))

    def assign(self, other: Inventory) -> None:
        """other의 내용을 이 객체에 덮어쓴다 (객체 동일성 유지)."""
        self.hotbar[:] = other.hotbar
        self.main.clear()
        self.main.update(other.main)

    def iter_stacks(self) -> Iterator[ItemStack]:
        """점유된 모든 스택. 핫바 먼저, 그다음 메인."""
        for stack in self.hotbar:
            if stack is not None:
                yield stack
        for stack in self.main.values():
            if stack is not None:
                yield stack

    def total_count(self, block_id: int) -> int:
        return sum(s.count for s in self.iter_stacks() if s.is_block(block_id))


class PlacementOutcome(str, Enum):
    STACKED_HOTBAR = "stacked_hotbar"
    ADDED_HOTBAR = "added_hotbar"
    STACKED_MAIN = "stacked_main"
    ADDED_MAIN = "added_main"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class PlacementResult:
    """배치 결과. 어느 영역/슬롯에 들어갔는지와 결과 수량."""

    outcome: PlacementOutcome
    block_id: int
    count: int  # 변경된 스택의 결과 수량 (OVERFLOW = 0)
    max_stack: int
    hotbar_index: Optional[int] = None
    grid_point: Optional[GridPoint] = None

    @property
    def placed(self) -> bool:
        return self.outcome != PlacementOutcome.OVERFLOW
