"""인벤토리 배치 Core — 순수 Python, 호스트 무관"""

from .messages import COLOR_RED, format_status
from .models import (
    GridPoint,
    Inventory,
    ItemClass,
    ItemStack,
    PlacementOutcome,
    PlacementResult,
)
from .placement import DEFAULT_GRID_SIZE, place_item
from .stack_limits import (
    DEFAULT_LIMIT_ENTRIES,
    DEFAULT_MAX_STACK,
    LimitLoadResult,
    StackLimitTable,
    build_stack_limits,
    load_limit_entries,
)

__all__ = [
    "COLOR_RED",
    "DEFAULT_GRID_SIZE",
    "DEFAULT_LIMIT_ENTRIES",
    "DEFAULT_MAX_STACK",
    "GridPoint",
    "Inventory",
    "ItemClass",
    "ItemStack",
    "LimitLoadResult",
    "PlacementOutcome",
    "PlacementResult",
    "StackLimitTable",
    "build_stack_limits",
    "format_status",
    "load_limit_entries",
    "place_item",
]
