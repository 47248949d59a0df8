"""
Parenthesis-aware splitting of comma separated CSS values.
"""

from typing import List


def split_top_level(value: str, separator: str = ",") -> List[str]:
    """Split ``value`` on separators that sit outside any parentheses.

    ``"rgba(1,2,3,0.5), #fff"`` gives ``["rgba(1,2,3,0.5)", "#fff"]``.
    Unbalanced input never raises: a stray ``)`` is kept as text and an
    unclosed ``(`` swallows the rest of the value into the last segment.
    """
    segments: List[str] = []
    if not value:
        return segments
    depth = 0
    current: List[str] = []
    for char in value:
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(0, depth - 1)
        elif char == separator and depth == 0:
            segment = "".join(current).strip()
            if segment:
                segments.append(segment)
            current = []
            continue
        current.append(char)
    tail = "".join(current).strip()
    if tail:
        segments.append(tail)
    return segments
