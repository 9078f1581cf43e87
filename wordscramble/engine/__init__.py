from .validation import (
    normalize_candidate,
    is_long_enough,
    is_original,
    is_possible,
    is_real,
)

__all__ = ["normalize_candidate", "is_long_enough", "is_original", "is_possible", "is_real"]
