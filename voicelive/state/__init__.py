from .relay import RelayState
from .runtime import RuntimeDeps
from .settings import AppSettings

__all__ = ["AppSettings", "RelayState", "RuntimeDeps"]
