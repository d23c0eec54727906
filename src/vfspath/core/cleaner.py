"""
Lexical path cleaning.

``clean`` rewrites a path into the shortest string that names the same
location, working only on the text of the path. Nothing is looked up on a
real file system, so ``..`` is resolved purely against the preceding segment.
"""

from .lazybuf import LazyBuffer
from .models import DEFAULT_SEPARATOR


def clean(path: str, sep: str = DEFAULT_SEPARATOR) -> str:
    """
    Return the shortest path lexically equivalent to ``path``.

    Rules applied in a single pass:

    1. Runs of separators collapse to one.
    2. ``.`` segments are removed.
    3. ``..`` removes the segment before it; in a rooted path, ``..`` at the
       root is dropped; in an unrooted path, ``..`` with nothing left to
       remove is kept.
    4. Trailing separators are removed, except for the root itself.

    An empty result (or empty input) becomes ``"."``.

    Args:
        path: Path to clean
        sep: Separator character

    Returns:
        Cleaned path
    """
    if path == "":
        return "."
    rooted = path[0] == sep

    # r: next input index to read
    # out.w: next output index to write
    # dotdot: output index where '..' must stop (the root separator, or the
    #         end of a leading '../..' run)
    n = len(path)
    out = LazyBuffer(path)
    r, dotdot = 0, 0
    if rooted:
        out.append(sep)
        r, dotdot = 1, 1

    while r < n:
        c = path[r]
        if c == sep:
            # empty segment
            r += 1
        elif c == '.' and (r + 1 == n or path[r + 1] == sep):
            # '.' segment
            r += 1
        elif c == '.' and path[r + 1] == '.' and (r + 2 == n or path[r + 2] == sep):
            # '..' segment: remove back to the last separator
            r += 2
            if out.w > dotdot:
                out.w -= 1
                while out.w > dotdot and out.index(out.w) != sep:
                    out.w -= 1
            elif not rooted:
                if out.w > 0:
                    out.append(sep)
                out.append('.')
                out.append('.')
                dotdot = out.w
        else:
            # real segment, separated from whatever is already written
            if (rooted and out.w != 1) or (not rooted and out.w != 0):
                out.append(sep)
            while r < n and path[r] != sep:
                out.append(path[r])
                r += 1

    if out.w == 0:
        out.append('.')

    return out.string()
