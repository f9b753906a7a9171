"""블록 레지스트리"""

from .registry import BlockRegistry, UnknownBlockTypeError

__all__ = ["BlockRegistry", "UnknownBlockTypeError"]
