"""
Core data models for vfspath.

This module contains the configuration and the small value types returned
by the path operations and the tree builder.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = '/'


@dataclass
class Config:
    """Configuration settings for vfspath."""

    separator: str = field(
        default_factory=lambda: os.getenv('VFSPATH_SEPARATOR', DEFAULT_SEPARATOR)
    )

    def __post_init__(self):
        if len(self.separator) != 1:
            raise ValueError(
                f"Separator must be a single character, got {self.separator!r}"
            )
        if self.separator == '.':
            raise ValueError("Separator cannot be '.'")
        logger.debug("Using path separator %r", self.separator)


class SplitResult(NamedTuple):
    """Directory and file parts of a path; the directory keeps its trailing separator."""

    dir: str
    file: str


@dataclass
class FileNode:
    """Represents a file or directory in a virtual tree."""

    path: str
    name: str
    type: str  # 'file' or 'dir'
    children: List['FileNode'] = field(default_factory=list)

    def is_file(self) -> bool:
        """Check if this node represents a file."""
        return self.type == 'file'

    def is_directory(self) -> bool:
        """Check if this node represents a directory."""
        return self.type == 'dir'
