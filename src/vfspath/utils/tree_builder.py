"""FileNode tree building utilities."""

import logging
from typing import Iterable, Optional, Set
from ..core.models import FileNode
from .path_utils import PathUtils

logger = logging.getLogger(__name__)


class FileTreeBuilder:
    """Utilities for building FileNode trees from virtual paths."""

    @staticmethod
    def from_paths(
        root_name: str,
        file_paths: Iterable[str],
        path_utils: Optional[PathUtils] = None
    ) -> FileNode:
        """
        Build hierarchical FileNode tree from flat list of file paths.

        Every path is cleaned first, so "a/./b" and "a//b" land on the same
        node. Paths that clean to "." or to the root name no file and are
        skipped. Directories are matched by full path, so "/a" and "a" stay
        separate nodes.

        Args:
            root_name: Name of the root node
            file_paths: Paths to include in tree
            path_utils: Path operations to use (default separator if omitted)

        Returns:
            Root FileNode with hierarchical structure
        """
        if path_utils is None:
            path_utils = PathUtils()

        root_node = FileNode(
            path=root_name,
            name=root_name,
            type="dir"
        )
        sep = path_utils.separator
        seen: Set[str] = set()

        for file_path in file_paths:
            cleaned = path_utils.clean(file_path)
            parts = [part for part in cleaned.split(sep) if part and part != "."]
            if not parts:
                logger.debug("Skipping %r: names no file", file_path)
                continue

            if cleaned in seen:
                continue
            seen.add(cleaned)

            current_node = root_node
            prefix = sep if path_utils.is_abs(cleaned) else ""

            # Create directory nodes as needed
            for i, part in enumerate(parts[:-1]):
                dir_path = prefix + sep.join(parts[:i + 1])
                for child in current_node.children:
                    if child.path == dir_path and child.type == "dir":
                        current_node = child
                        break
                else:
                    dir_node = FileNode(
                        path=dir_path,
                        name=part,
                        type="dir"
                    )
                    current_node.children.append(dir_node)
                    current_node = dir_node

            current_node.children.append(FileNode(
                path=cleaned,
                name=parts[-1],
                type="file"
            ))

        return root_node

    @staticmethod
    def paths_from_tree(tree: FileNode) -> Set[str]:
        """
        Extract all file paths from a FileNode tree.

        Args:
            tree: Root FileNode to traverse

        Returns:
            Set of all file paths in the tree
        """
        paths = set()

        def _collect_paths(node: FileNode) -> None:
            if node.type == "file":
                paths.add(node.path)
            for child in node.children:
                _collect_paths(child)

        _collect_paths(tree)
        return paths
