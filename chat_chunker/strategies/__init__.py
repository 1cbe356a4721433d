"""Strategy objects encapsulating reusable heuristics."""

from .markers import (  # noqa: F401
    BULLET_CHARS,
    BULLET_CHARS_ESC,
    DEFAULT_STRATEGY,
    ListMarkerStrategy,
    default_marker_strategy,
    starts_with_bullet,
    starts_with_list_marker,
    starts_with_number,
)

__all__ = [
    "ListMarkerStrategy",
    "BULLET_CHARS",
    "BULLET_CHARS_ESC",
    "DEFAULT_STRATEGY",
    "default_marker_strategy",
    "starts_with_bullet",
    "starts_with_list_marker",
    "starts_with_number",
]
