"""블록 종류 레지스트리 — 이름 ↔ 숫자 ID

호스트 엔진의 레지스트리를 프로세스 내에서 대신하는 구현.
InMemoryHost와 개발 서버에서 사용한다.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class UnknownBlockTypeError(LookupError):
    """등록되지 않은 블록 이름 또는 ID"""


class BlockRegistry:
    """블록 이름 ↔ ID 저장소. ID는 등록 순서대로 1부터 부여."""

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}
        self._names: dict[int, str] = {}

    def register(self, name: str) -> int:
        """블록 등록. 이미 있으면 기존 ID 반환."""
        if not name:
            raise ValueError("block name must not be empty")
        existing = self._ids.get(name)
        if existing is not None:
            return existing

        block_id = len(self._ids) + 1
        self._ids[name] = block_id
        self._names[block_id] = name
        logger.debug("Registered block %s → %d", name, block_id)
        return block_id

    def load_from_json(self, path: str | Path) -> int:
        """core_blocks.json 로드 (이름 배열). 반환: 새로 등록된 수량."""
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            names: list[str] = json.load(f)

        before = self.count()
        for name in names:
            if not isinstance(name, str) or not name:
                logger.warning("Skipping invalid block name: %r", name)
                continue
            self.register(name)

        added = self.count() - before
        logger.info("Loaded %d block types from %s", added, path)
        return added

    def get_id(self, name: str) -> int:
        try:
            return self._ids[name]
        except KeyError:
            raise UnknownBlockTypeError(f"Unknown block type: {name}") from None

    def get_name(self, block_id: int) -> str:
        try:
            return self._names[block_id]
        except KeyError:
            raise UnknownBlockTypeError(f"Unknown block id: {block_id}") from None

    def names(self) -> list[str]:
        return list(self._ids)

    def count(self) -> int:
        return len(self._ids)
