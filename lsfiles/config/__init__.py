# lsfiles/config/__init__.py
from .settings import TraversalConfig, DEFAULT_IGNORED

__all__ = ["TraversalConfig", "DEFAULT_IGNORED"]
