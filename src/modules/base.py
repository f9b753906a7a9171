"""모듈(모드) 기반 인터페이스"""

from abc import ABC, abstractmethod
from typing import List


class GameModule(ABC):
    """모든 서버 모드의 기반 인터페이스

    규칙:
    - 모듈은 다른 모듈을 직접 import하지 않는다
    - 호스트 이벤트 수신은 EventBus 구독으로 한다
    - 의존 모듈이 먼저 활성화되어 있어야 활성화된다
    """

    _enabled: bool

    def __init__(self) -> None:
        self._enabled = False

    @property
    @abstractmethod
    def name(self) -> str:
        """모듈 고유 이름 (예: 'core_blocks', 'inventory')"""
        ...

    @property
    def dependencies(self) -> List[str]:
        """이 모듈이 의존하는 다른 모듈 이름 목록

        기본값은 빈 리스트 (의존성 없음).
        """
        return []

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @abstractmethod
    def on_enable(self) -> None:
        """모듈 활성화 시 초기화 작업 (이벤트 구독 등)"""
        ...

    @abstractmethod
    def on_disable(self) -> None:
        """모듈 비활성화 시 정리 작업"""
        ...
