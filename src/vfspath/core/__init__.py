"""Core components for vfspath."""

from .models import Config, SplitResult, FileNode, DEFAULT_SEPARATOR
from .lazybuf import LazyBuffer
from .cleaner import clean
from .pathops import is_abs, split, join, ext, base, dir

__all__ = [
    "Config",
    "SplitResult",
    "FileNode",
    "DEFAULT_SEPARATOR",
    "LazyBuffer",
    "clean",
    "is_abs",
    "split",
    "join",
    "ext",
    "base",
    "dir",
]
