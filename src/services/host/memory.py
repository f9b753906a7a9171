"""In-memory host for testing and the development server."""

from collections import defaultdict

from src.config import settings
from src.core.blocks.registry import BlockRegistry
from src.core.inventory.models import Inventory
from src.core.logging import get_logger
from src.services.host.base import HostGateway

logger = get_logger(__name__)


class InMemoryHost(HostGateway):
    """Host gateway backed by a BlockRegistry and plain dicts.

    Inventories are created lazily on first access. Notifications and
    messages are recorded per player so callers can inspect them.
    """

    def __init__(
        self,
        registry: BlockRegistry | None = None,
        hotbar_size: int | None = None,
    ) -> None:
        self.registry = registry or BlockRegistry()
        self._hotbar_size = (
            settings.HOTBAR_SIZE if hotbar_size is None else hotbar_size
        )
        if self._hotbar_size < 1:
            raise ValueError(f"hotbar_size must be >= 1, got {self._hotbar_size}")
        self._inventories: dict[str, Inventory] = {}
        self._messages: dict[str, list[str]] = defaultdict(list)
        self._notifications: dict[str, int] = defaultdict(int)

    def resolve_block_id(self, name: str) -> int:
        return self.registry.get_id(name)

    def resolve_block_name(self, block_id: int) -> str:
        return self.registry.get_name(block_id)

    def get_inventory(self, player_id: str) -> Inventory:
        inventory = self._inventories.get(player_id)
        if inventory is None:
            inventory = Inventory.empty(self._hotbar_size)
            self._inventories[player_id] = inventory
            logger.debug("Created inventory for player %s", player_id)
        return inventory

    def has_player(self, player_id: str) -> bool:
        return player_id in self._inventories

    def notify_inventory_changed(self, player_id: str) -> None:
        self._notifications[player_id] += 1

    def send_message(self, player_id: str, text: str) -> None:
        self._messages[player_id].append(text)
        logger.debug("Message to %s: %s", player_id, text)

    def messages(self, player_id: str) -> list[str]:
        """Messages sent to a player, oldest first."""
        return list(self._messages.get(player_id, []))

    def notifications(self, player_id: str) -> int:
        """Number of inventory re-sync notifications for a player."""
        return self._notifications.get(player_id, 0)
