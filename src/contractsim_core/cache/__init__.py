"""
Exposes the public interface of the cache package.
"""
from .service import DispatcherCache

__all__ = [
    "DispatcherCache",
]
