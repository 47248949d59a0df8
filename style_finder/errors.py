"""
Exceptions raised by the capture layer and the snapshot accessors.
"""

from typing import Optional


class StyleFinderError(Exception):
    pass


class PropertyReadError(StyleFinderError):
    def __init__(self, prop: str, tag: str = ""):
        self.prop = prop
        self.tag = tag
        super().__init__(f"could not read '{prop}' on <{tag or '?'}>")


class CaptureError(StyleFinderError):
    def __init__(self, url: str, stage: str, cause: Optional[BaseException] = None):
        self.url = url
        self.stage = stage
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to capture {url} at {stage}{detail}")
