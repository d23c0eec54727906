"""Path operations layered on top of ``clean``."""

from .cleaner import clean
from .models import DEFAULT_SEPARATOR, SplitResult


def is_abs(path: str, sep: str = DEFAULT_SEPARATOR) -> bool:
    """Check if the path is rooted, i.e. starts with the separator."""
    return path.startswith(sep)


def split(path: str, sep: str = DEFAULT_SEPARATOR) -> SplitResult:
    """
    Split a path immediately after its last separator.

    The directory part keeps the trailing separator. A path without any
    separator has an empty directory part. No cleaning is applied.
    """
    i = path.rfind(sep)
    return SplitResult(path[:i + 1], path[i + 1:])


def join(*elems: str, sep: str = DEFAULT_SEPARATOR) -> str:
    """
    Join path elements with the separator and clean the result.

    Leading empty elements are ignored; empty elements after the first
    non-empty one are kept and collapse during cleaning. If every element is
    empty the result is ``""``, not ``"."``.
    """
    for i, e in enumerate(elems):
        if e != "":
            return clean(sep.join(elems[i:]), sep)
    return ""


def ext(path: str, sep: str = DEFAULT_SEPARATOR) -> str:
    """Return the extension of the final segment, including the dot, or ``""``."""
    for i in range(len(path) - 1, -1, -1):
        if path[i] == sep:
            break
        if path[i] == '.':
            return path[i:]
    return ""


def base(path: str, sep: str = DEFAULT_SEPARATOR) -> str:
    """
    Return the last segment of the path.

    Trailing separators are ignored. An empty path gives ``"."`` and a path
    made only of separators gives a single separator.
    """
    if path == "":
        return "."
    path = path.rstrip(sep)
    path = path[path.rfind(sep) + 1:]
    if path == "":
        return sep
    return path


def dir(path: str, sep: str = DEFAULT_SEPARATOR) -> str:
    """Return everything up to the last separator, cleaned."""
    return clean(path[:path.rfind(sep) + 1], sep)
