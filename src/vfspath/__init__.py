"""Lexical path manipulation for virtual file systems."""

from .core import Config, SplitResult, clean, is_abs, split, join, ext, base, dir
from .utils import PathUtils, FileTreeBuilder

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Config",
    "SplitResult",
    "PathUtils",
    "FileTreeBuilder",
    "clean",
    "is_abs",
    "split",
    "join",
    "ext",
    "base",
    "dir",
]
