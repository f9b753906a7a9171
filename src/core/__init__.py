"""Block Drop Inventory Core"""
__version__ = "0.1.0-alpha"

from src.core.blocks import BlockRegistry, UnknownBlockTypeError
from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes
from src.core.inventory import (
    Inventory,
    ItemStack,
    PlacementOutcome,
    PlacementResult,
    StackLimitTable,
    place_item,
)

__all__ = [
    "BlockRegistry",
    "UnknownBlockTypeError",
    "EventBus",
    "GameEvent",
    "EventTypes",
    "Inventory",
    "ItemStack",
    "PlacementOutcome",
    "PlacementResult",
    "StackLimitTable",
    "place_item",
]
