"""블록 종류별 최대 스택 수 테이블

호스트가 부여한 block_id 기준. 이름 → ID 해석은 호출자가 resolver로 주입한다.
레지스트리가 아직 다 로드되지 않았을 수 있으므로, 해석 실패한 이름은
pending으로 남겨두고 나중에 resolve_pending()으로 재시도한다.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

logger = logging.getLogger(__name__)

DEFAULT_MAX_STACK = 55

DEFAULT_LIMIT_ENTRIES: tuple[tuple[str, int], ...] = (
    ("Stone", 30),
    ("Cobblestone", 30),
    ("Granite", 30),
    ("Dirt", 64),
    ("Sand", 64),
    ("GoldOre", 20),
    ("IronOre", 25),
    ("CoalOre", 40),
)

BlockResolver = Callable[[str], int]


class StackLimitTable:
    """block_id → 최대 스택 수. 오버라이드 없으면 default."""

    def __init__(self, default: int = DEFAULT_MAX_STACK) -> None:
        _check_limit(default)
        self._default = default
        self._overrides: dict[int, int] = {}
        self._pending: dict[str, int] = {}  # 해석 실패한 이름 → limit

    @property
    def default(self) -> int:
        return self._default

    @property
    def overrides(self) -> dict[int, int]:
        return dict(self._overrides)

    @property
    def unresolved(self) -> list[str]:
        return list(self._pending)

    def set_limit(self, block_type_name: str, limit: int, resolve: BlockResolver) -> bool:
        """이름을 해석해 오버라이드 등록. 실패 시 False + pending 보관."""
        _check_limit(limit)
        try:
            block_id = resolve(block_type_name)
        except LookupError:
            self._pending[block_type_name] = limit
            return False

        self._overrides[block_id] = limit
        self._pending.pop(block_type_name, None)
        return True

    def get_limit(self, block_type_id: int) -> int:
        return self._overrides.get(block_type_id, self._default)

    def resolve_pending(self, resolve: BlockResolver) -> list[str]:
        """pending 이름 재해석. 반환: 이번에 해석된 이름 목록."""
        resolved: list[str] = []
        for name, limit in list(self._pending.items()):
            if self.set_limit(name, limit, resolve):
                resolved.append(name)
        return resolved

    def __len__(self) -> int:
        return len(self._overrides)


@dataclass
class LimitLoadResult:
    table: StackLimitTable
    resolved: list[str] = field(default_factory=list)
    unresolved: list[str] = field(default_factory=list)


def build_stack_limits(
    entries: Iterable[tuple[str, int]],
    resolve: BlockResolver,
    default: int = DEFAULT_MAX_STACK,
) -> LimitLoadResult:
    """(name, limit) 목록으로 테이블 구성. 로그/재시도 판단은 호출자 몫."""
    table = StackLimitTable(default)
    result = LimitLoadResult(table=table)
    for name, limit in entries:
        if table.set_limit(name, limit, resolve):
            result.resolved.append(name)
        else:
            result.unresolved.append(name)
    return result


def load_limit_entries(path: str | Path) -> list[tuple[str, int]]:
    """stack_limits.json 로드.

    형식: [{"name": "Stone", "limit": 30}, ...]
    잘못된 항목은 경고 로그 후 건너뛴다.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        raw_list: list[dict] = json.load(f)

    entries: list[tuple[str, int]] = []
    for raw in raw_list:
        try:
            name = str(raw["name"])
            limit = int(raw["limit"])
            _check_limit(limit)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping stack limit entry %r: %s", raw, e)
            continue
        entries.append((name, limit))

    logger.info("Loaded %d stack limit entries from %s", len(entries), path)
    return entries


def _check_limit(limit: int) -> None:
    if limit < 1:
        raise ValueError(f"stack limit must be >= 1, got {limit}")
