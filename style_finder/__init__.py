"""
Style Finder: typography, color and gradient extraction from rendered pages.
"""

from .cache import ResultCache
from .colors import color_to_hex, nearest_name, to_hex
from .config import ScrapeConfig
from .errors import CaptureError, PropertyReadError, StyleFinderError
from .extractor import StyleFinder, extract_all
from .gradients import extract_gradients, parse_gradient
from .models import (
    ColorRecord,
    CSSMeta,
    ExtractionResult,
    GradientInfo,
    GradientRecord,
    TypographyGroup,
)
from .palette import extract_colors
from .snapshot import SnapshotElement, StyleSnapshot
from .title import extract_title
from .tokenizer import split_top_level
from .typography import extract_typography

__version__ = "0.1.0"

__all__ = [
    "CaptureError",
    "ColorRecord",
    "CSSMeta",
    "ExtractionResult",
    "GradientInfo",
    "GradientRecord",
    "PropertyReadError",
    "ResultCache",
    "ScrapeConfig",
    "SnapshotElement",
    "StyleFinder",
    "StyleFinderError",
    "StyleSnapshot",
    "TypographyGroup",
    "color_to_hex",
    "extract_all",
    "extract_colors",
    "extract_gradients",
    "extract_title",
    "extract_typography",
    "nearest_name",
    "parse_gradient",
    "split_top_level",
    "to_hex",
]
