"""Path operations bound to a configured separator."""

from typing import List, Optional

from ..core import pathops
from ..core.cleaner import clean
from ..core.models import Config, SplitResult


class PathUtils:
    """Utilities for consistent path handling with one VFS separator."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    @property
    def separator(self) -> str:
        return self.config.separator

    def is_abs(self, path: str) -> bool:
        return pathops.is_abs(path, self.separator)

    def clean(self, path: str) -> str:
        return clean(path, self.separator)

    def split(self, path: str) -> SplitResult:
        return pathops.split(path, self.separator)

    def join(self, *elems: str) -> str:
        return pathops.join(*elems, sep=self.separator)

    def ext(self, path: str) -> str:
        return pathops.ext(path, self.separator)

    def base(self, path: str) -> str:
        return pathops.base(path, self.separator)

    def dir(self, path: str) -> str:
        return pathops.dir(path, self.separator)

    def split_components(self, path: str) -> List[str]:
        """
        Clean a path and split it into segments.

        Args:
            path: Path to split

        Returns:
            List of segments; empty for "." and for the root alone
        """
        cleaned = self.clean(path)
        if cleaned == ".":
            return []
        return [part for part in cleaned.split(self.separator) if part]

    def join_path_components(self, components: List[str]) -> str:
        """
        Join path components with the separator.

        Args:
            components: List of path components

        Returns:
            Joined and cleaned path
        """
        return self.join(*components)
