"""블록 파괴 시 아이템 배치 정책 — 순수 함수

우선순위 (먼저 성공한 단계에서 종료):
1. 핫바 스택 쌓기
2. 핫바 빈 슬롯
3. 메인 스택 쌓기
4. 메인 빈 칸
5. 오버플로우 (아이템 소실)

입력 인벤토리는 변경하지 않는다. 사본에 적용해 반환.
"""

from typing import Optional

from .models import GridPoint, Inventory, ItemStack, PlacementOutcome, PlacementResult
from .stack_limits import StackLimitTable

DEFAULT_GRID_SIZE: GridPoint = (40, 12)  # (width, height)


def try_stack_hotbar(
    inv: Inventory, block_id: int, max_stack: int
) -> Optional[PlacementResult]:
    for i, stack in enumerate(inv.hotbar):
        if stack is not None and stack.is_block(block_id) and stack.count < max_stack:
            inv.hotbar[i] = stack.incremented()
            return PlacementResult(
                PlacementOutcome.STACKED_HOTBAR,
                block_id,
                stack.count + 1,
                max_stack,
                hotbar_index=i,
            )
    return None


def try_add_hotbar(
    inv: Inventory, block_id: int, max_stack: int
) -> Optional[PlacementResult]:
    for i, stack in enumerate(inv.hotbar):
        if stack is None:
            inv.hotbar[i] = ItemStack(block_id=block_id, count=1)
            return PlacementResult(
                PlacementOutcome.ADDED_HOTBAR, block_id, 1, max_stack, hotbar_index=i
            )
    return None


def try_stack_main(
    inv: Inventory, block_id: int, max_stack: int
) -> Optional[PlacementResult]:
    # dict 삽입 순서 (좌표 순서 아님)
    for point, stack in inv.main.items():
        if stack is not None and stack.is_block(block_id) and stack.count < max_stack:
            inv.main[point] = stack.incremented()
            return PlacementResult(
                PlacementOutcome.STACKED_MAIN,
                block_id,
                stack.count + 1,
                max_stack,
                grid_point=point,
            )
    return None


def find_vacant_point(
    inv: Inventory, grid_size: GridPoint = DEFAULT_GRID_SIZE
) -> Optional[GridPoint]:
    """행 우선(y 바깥, x 안쪽)으로 첫 빈 칸 탐색. 키 부재와 None 값 모두 빈 칸."""
    width, height = grid_size
    for y in range(height):
        for x in range(width):
            if inv.main.get((x, y)) is None:
                return (x, y)
    return None


def try_add_main(
    inv: Inventory,
    block_id: int,
    max_stack: int,
    grid_size: GridPoint = DEFAULT_GRID_SIZE,
) -> Optional[PlacementResult]:
    point = find_vacant_point(inv, grid_size)
    if point is None:
        return None
    inv.main[point] = ItemStack(block_id=block_id, count=1)
    return PlacementResult(
        PlacementOutcome.ADDED_MAIN, block_id, 1, max_stack, grid_point=point
    )


def place_item(
    inventory: Inventory,
    block_id: int,
    limits: StackLimitTable,
    grid_size: GridPoint = DEFAULT_GRID_SIZE,
) -> tuple[Inventory, PlacementResult]:
    """블록 아이템 1개 배치. 반환: (갱신된 사본, 결과)

    오버플로우면 변경 없는 사본과 OVERFLOW 결과.
    """
    width, height = grid_size
    if width < 1 or height < 1:
        raise ValueError(f"grid_size must be positive, got {grid_size}")

    max_stack = limits.get_limit(block_id)
    updated = inventory.copy()

    result = (
        try_stack_hotbar(updated, block_id, max_stack)
        or try_add_hotbar(updated, block_id, max_stack)
        or try_stack_main(updated, block_id, max_stack)
        or try_add_main(updated, block_id, max_stack, grid_size)
    )
    if result is None:
        result = PlacementResult(PlacementOutcome.OVERFLOW, block_id, 0, max_stack)
    return updated, result
