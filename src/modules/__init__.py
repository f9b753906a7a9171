"""서버 모드(모듈) 시스템"""

from src.modules.base import GameModule
from src.modules.module_manager import ModuleManager

__all__ = ["GameModule", "ModuleManager"]
