"""배치 정책 테스트: 핫바 → 메인 → 오버플로우 순서, 스택 상한"""

from __future__ import annotations

import pytest

from src.core.inventory.messages import format_status
from src.core.inventory.models import (
    Inventory,
    ItemStack,
    PlacementOutcome,
    PlacementResult,
)
from src.core.inventory.placement import find_vacant_point, place_item
from src.core.inventory.stack_limits import StackLimitTable

STONE = 1
DIRT = 2
GRASS = 3
WOOD = 4

NAMES = {"Stone": STONE, "Dirt": DIRT, "Grass": GRASS, "Wood": WOOD}


def _make_limits() -> StackLimitTable:
    table = StackLimitTable()
    table.set_limit("Stone", 30, NAMES.__getitem__)
    table.set_limit("Dirt", 64, NAMES.__getitem__)
    return table


def _make_inventory(*hotbar: ItemStack | None, size: int = 10) -> Inventory:
    inv = Inventory.empty(size)
    for i, stack in enumerate(hotbar):
        inv.hotbar[i] = stack
    return inv


def _full_hotbar(block_id: int = WOOD, size: int = 10) -> Inventory:
    # 다른 종류 블록으로 가득 찬 핫바
    return _make_inventory(*[ItemStack(block_id, 55)] * size, size=size)


def _assert_counts_in_bounds(inv: Inventory, limits: StackLimitTable) -> None:
    for stack in inv.iter_stacks():
        assert 1 <= stack.count <= limits.get_limit(stack.block_id)


@pytest.fixture()
def limits() -> StackLimitTable:
    return _make_limits()


class TestHotbar:
    def test_stack_onto_partial_hotbar_stack(self, limits) -> None:
        inv = _make_inventory(ItemStack(STONE, 29))
        updated, result = place_item(inv, STONE, limits)

        assert result.outcome == PlacementOutcome.STACKED_HOTBAR
        assert result.hotbar_index == 0
        assert result.count == 30
        assert result.max_stack == 30
        assert updated.hotbar[0] == ItemStack(STONE, 30)
        assert updated.hotbar[1:] == [None] * 9
        assert updated.main == {}

    def test_full_stack_skipped_for_empty_slot(self, limits) -> None:
        inv = _make_inventory(ItemStack(STONE, 30))
        updated, result = place_item(inv, STONE, limits)

        assert result.outcome == PlacementOutcome.ADDED_HOTBAR
        assert result.hotbar_index == 1
        assert updated.hotbar[0] == ItemStack(STONE, 30)
        assert updated.hotbar[1] == ItemStack(STONE, 1)

    def test_stacking_preferred_over_earlier_empty_slot(self, limits) -> None:
        inv = _make_inventory(None, ItemStack(DIRT, 5))
        updated, result = place_item(inv, DIRT, limits)

        assert result.outcome == PlacementOutcome.STACKED_HOTBAR
        assert result.hotbar_index == 1
        assert updated.hotbar[0] is None

    def test_other_block_type_never_stacked(self, limits) -> None:
        inv = _make_inventory(ItemStack(DIRT, 1))
        updated, result = place_item(inv, STONE, limits)

        assert result.outcome == PlacementOutcome.ADDED_HOTBAR
        assert updated.hotbar[0] == ItemStack(DIRT, 1)

    def test_default_limit_for_unconfigured_type(self, limits) -> None:
        inv = _make_inventory(ItemStack(GRASS, 54))
        updated, result = place_item(inv, GRASS, limits)
        assert result.count == 55
        assert result.max_stack == 55

        updated, result = place_item(updated, GRASS, limits)
        assert result.outcome == PlacementOutcome.ADDED_HOTBAR

    def test_oversized_stack_never_incremented(self, limits) -> None:
        inv = _make_inventory(ItemStack(STONE, 40))
        updated, result = place_item(inv, STONE, limits)

        assert result.outcome == PlacementOutcome.ADDED_HOTBAR
        assert result.hotbar_index == 1
        assert updated.hotbar[0] == ItemStack(STONE, 40)
        assert updated.hotbar[1] == ItemStack(STONE, 1)

    def test_input_not_mutated(self, limits) -> None:
        inv = _make_inventory(ItemStack(STONE, 3))
        place_item(inv, STONE, limits)
        assert inv.hotbar[0] == ItemStack(STONE, 3)


class TestMain:
    def test_hotbar_full_goes_to_main_origin(self, limits) -> None:
        inv = _full_hotbar()
        updated, result = place_item(inv, STONE, limits)

        assert result.outcome == PlacementOutcome.ADDED_MAIN
        assert result.grid_point == (0, 0)
        assert updated.main == {(0, 0): ItemStack(STONE, 1)}
        assert updated.hotbar == inv.hotbar

    def test_hotbar_preferred_over_main_stack(self, limits) -> None:
        inv = _make_inventory()
        inv.main[(3, 2)] = ItemStack(STONE, 5)
        updated, result = place_item(inv, STONE, limits)

        assert result.outcome == PlacementOutcome.ADDED_HOTBAR
        assert updated.main[(3, 2)] == ItemStack(STONE, 5)

    def test_stack_in_main_by_insertion_order(self, limits) -> None:
        inv = _full_hotbar()
        inv.main[(5, 5)] = ItemStack(STONE, 10)
        inv.main[(0, 0)] = ItemStack(STONE, 10)
        updated, result = place_item(inv, STONE, limits)

        assert result.outcome == PlacementOutcome.STACKED_MAIN
        assert result.grid_point == (5, 5)
        assert updated.main[(5, 5)].count == 11
        assert updated.main[(0, 0)].count == 10

    def test_full_main_stack_skipped(self, limits) -> None:
        inv = _full_hotbar()
        inv.main[(0, 0)] = ItemStack(STONE, 30)
        updated, result = place_item(inv, STONE, limits)

        assert result.outcome == PlacementOutcome.ADDED_MAIN
        assert result.grid_point == (1, 0)

    def test_oversized_main_stack_never_incremented(self, limits) -> None:
        inv = _full_hotbar()
        inv.main[(0, 0)] = ItemStack(STONE, 40)
        updated, result = place_item(inv, STONE, limits)

        assert result.outcome == PlacementOutcome.ADDED_MAIN
        assert result.grid_point == (1, 0)
        assert updated.main[(0, 0)] == ItemStack(STONE, 40)
        assert updated.main[(1, 0)] == ItemStack(STONE, 1)

    def test_vacancy_row_major(self) -> None:
        inv = Inventory.empty(1)
        inv.main[(0, 0)] = ItemStack(WOOD, 1)
        inv.main[(1, 0)] = ItemStack(WOOD, 1)
        assert find_vacant_point(inv, (2, 3)) == (0, 1)

    def test_none_placeholder_is_vacant(self, limits) -> None:
        inv = _full_hotbar()
        inv.main[(0, 0)] = ItemStack(WOOD, 1)
        inv.main[(1, 0)] = None
        updated, result = place_item(inv, STONE, limits)

        assert result.grid_point == (1, 0)
        assert updated.main[(1, 0)] == ItemStack(STONE, 1)

    def test_stacks_outside_grid_still_stackable(self, limits) -> None:
        inv = _full_hotbar()
        inv.main[(100, 100)] = ItemStack(STONE, 1)
        updated, result = place_item(inv, STONE, limits, grid_size=(1, 1))

        assert result.outcome == PlacementOutcome.STACKED_MAIN
        assert result.grid_point == (100, 100)

    def test_invalid_grid_size(self, limits) -> None:
        with pytest.raises(ValueError):
            place_item(_make_inventory(), STONE, limits, grid_size=(0, 12))


class TestOverflow:
    def _full_everything(self, width: int = 4, height: int = 2) -> Inventory:
        inv = _full_hotbar()
        for y in range(height):
            for x in range(width):
                inv.main[(x, y)] = ItemStack(STONE, 30)
        return inv

    def test_overflow_leaves_state_unchanged(self, limits) -> None:
        inv = self._full_everything()
        before = inv.copy()
        updated, result = place_item(inv, STONE, limits, grid_size=(4, 2))

        assert result.outcome == PlacementOutcome.OVERFLOW
        assert result.placed is False
        assert result.count == 0
        assert updated == before
        assert inv == before

    def test_overflow_message_is_red(self, limits) -> None:
        _, result = place_item(self._full_everything(), STONE, limits, grid_size=(4, 2))
        assert format_status(result, "Stone") == "&cInventory full! Stone was lost."


class TestRepeatedPlacement:
    @pytest.mark.parametrize("n", [1, 30, 31, 95, 301])
    def test_total_equals_n_in_minimum_slots(self, limits, n) -> None:
        inv = _make_inventory()
        for _ in range(n):
            inv, result = place_item(inv, STONE, limits)
            assert result.placed

        assert inv.total_count(STONE) == n
        stacks = [s for s in inv.iter_stacks() if s.is_block(STONE)]
        assert len(stacks) == -(-n // 30)
        _assert_counts_in_bounds(inv, limits)

    def test_spills_from_hotbar_into_main(self, limits) -> None:
        inv = _make_inventory(size=2)
        for _ in range(61):
            inv, _ = place_item(inv, STONE, limits)

        assert inv.hotbar == [ItemStack(STONE, 30), ItemStack(STONE, 30)]
        assert inv.main == {(0, 0): ItemStack(STONE, 1)}


class TestMessages:
    @pytest.mark.parametrize(
        "result, expected",
        [
            (
                PlacementResult(PlacementOutcome.STACKED_HOTBAR, STONE, 12, 30, hotbar_index=0),
                "Stone now x12/30 [Hotbar]",
            ),
            (
                PlacementResult(PlacementOutcome.ADDED_HOTBAR, STONE, 1, 30, hotbar_index=2),
                "Picked up Stone (1/30) [Hotbar]",
            ),
            (
                PlacementResult(PlacementOutcome.STACKED_MAIN, STONE, 7, 30, grid_point=(1, 1)),
                "Stone x7/30 [Inventory]",
            ),
            (
                PlacementResult(PlacementOutcome.ADDED_MAIN, STONE, 1, 30, grid_point=(0, 0)),
                "Added Stone (1/30) [Inventory]",
            ),
        ],
    )
    def test_format_status(self, result, expected) -> None:
        assert format_status(result, "Stone") == expected
