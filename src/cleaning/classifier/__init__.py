"""
Line Classifier - общие предикаты и экстракторы для всех этапов.
"""

from .rtf_format import (
    strip_formatting,
    extract_formatting_prefix,
    trim_trailing_controls,
)
from .date_tokens import (
    extract_all_date_tokens,
    first_date_token,
    has_date_token,
    has_metadata_field,
)
from .line_classifier import (
    LineClassifier,
    is_obs_marker,
    is_date_marker,
    is_page_separator,
    is_marker,
    is_legacy_marker,
)

__all__ = [
    "LineClassifier",
    "strip_formatting",
    "extract_formatting_prefix",
    "trim_trailing_controls",
    "extract_all_date_tokens",
    "first_date_token",
    "has_date_token",
    "has_metadata_field",
    "is_obs_marker",
    "is_date_marker",
    "is_page_separator",
    "is_marker",
    "is_legacy_marker",
]
