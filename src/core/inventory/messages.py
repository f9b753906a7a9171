"""플레이어에게 보낼 상태 메시지 포맷

"&c" 등 색상 코드 접두어는 클라이언트가 해석한다.
"""

from .models import PlacementOutcome, PlacementResult

COLOR_RED = "&c"


def format_status(result: PlacementResult, block_name: str) -> str:
    """배치 결과 → 채팅 메시지"""
    outcome = result.outcome
    if outcome == PlacementOutcome.STACKED_HOTBAR:
        return f"{block_name} now x{result.count}/{result.max_stack} [Hotbar]"
    if outcome == PlacementOutcome.ADDED_HOTBAR:
        return f"Picked up {block_name} (1/{result.max_stack}) [Hotbar]"
    if outcome == PlacementOutcome.STACKED_MAIN:
        return f"{block_name} x{result.count}/{result.max_stack} [Inventory]"
    if outcome == PlacementOutcome.ADDED_MAIN:
        return f"Added {block_name} (1/{result.max_stack}) [Inventory]"
    return f"{COLOR_RED}Inventory full! {block_name} was lost."
