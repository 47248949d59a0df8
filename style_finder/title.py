"""
Page title resolution.
"""

from .snapshot import StyleSnapshot

UNKNOWN_TITLE = "Unknown Title"


def extract_title(snapshot: StyleSnapshot) -> str:
    titles = snapshot.titles
    for candidate in (titles.title, titles.og_title, titles.h1):
        if candidate and candidate.strip():
            return candidate.strip()
    return UNKNOWN_TITLE
