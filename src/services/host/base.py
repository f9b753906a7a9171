"""Abstract base class for the host engine gateway."""

from abc import ABC, abstractmethod

from src.core.inventory.models import Inventory


class HostGateway(ABC):
    """Services the host game engine provides to mods.

    Block registry lookups, per-player inventories, client re-sync
    and chat delivery all belong to the host. Implementations must
    return the host-owned inventory object, not a copy.
    """

    @abstractmethod
    def resolve_block_id(self, name: str) -> int:
        """Return the block-type id for a name.

        Raises:
            LookupError: if the name is not registered.
        """
        ...

    @abstractmethod
    def resolve_block_name(self, block_id: int) -> str:
        """Return the display name for a block-type id."""
        ...

    @abstractmethod
    def get_inventory(self, player_id: str) -> Inventory:
        """Return the mutable inventory owned by the host for a player."""
        ...

    @abstractmethod
    def notify_inventory_changed(self, player_id: str) -> None:
        """Ask the host to re-sync the player's inventory to the client."""
        ...

    @abstractmethod
    def send_message(self, player_id: str, text: str) -> None:
        """Deliver a chat/status line to the player."""
        ...
