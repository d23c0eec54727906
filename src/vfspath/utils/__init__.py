"""Utility modules for vfspath."""

from .path_utils import PathUtils
from .tree_builder import FileTreeBuilder

__all__ = ["PathUtils", "FileTreeBuilder"]
