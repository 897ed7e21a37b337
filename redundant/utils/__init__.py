from .text import normalize_key, normalize_text

__all__ = [
    "normalize_key",
    "normalize_text",
]
