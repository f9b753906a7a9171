"""CoreBlocksModule — 기본 블록 종류 등록

다른 모드가 블록 이름을 해석하기 전에 활성화되어야 한다.
"""

import logging
from pathlib import Path
from typing import List

from src.core.blocks.registry import BlockRegistry
from src.modules.base import GameModule

logger = logging.getLogger(__name__)


class CoreBlocksModule(GameModule):
    """기본 블록 레지스트리 모듈

    의존성: [] (기반 모듈)
    """

    def __init__(self, registry: BlockRegistry, blocks_path: str | Path) -> None:
        super().__init__()
        self._registry = registry
        self._blocks_path = Path(blocks_path)

    @property
    def name(self) -> str:
        return "core_blocks"

    @property
    def dependencies(self) -> List[str]:
        return []

    def on_enable(self) -> None:
        self._registry.load_from_json(self._blocks_path)

    def on_disable(self) -> None:
        # 이미 부여된 ID는 호스트 수명 동안 유지
        pass
