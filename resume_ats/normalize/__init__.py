from .text import (
    BULLET_GLYPHS,
    is_bullet_like,
    is_heading_like,
    normalize_layout,
    normalize_line,
    normalize_text,
    strip_bullet_prefix,
)

__all__ = [
    "BULLET_GLYPHS",
    "normalize_text",
    "normalize_layout",
    "normalize_line",
    "is_bullet_like",
    "is_heading_like",
    "strip_bullet_prefix",
]
