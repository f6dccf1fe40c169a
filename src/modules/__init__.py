"""호스트 모듈 시스템"""

from src.modules.base import HostModule
from src.modules.module_manager import ModuleManager

__all__ = ["HostModule", "ModuleManager"]
