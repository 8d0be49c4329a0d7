"""
Utility functions for lognormal_dist.
"""

from .validation import is_real_number, validate_location, validate_scale

__all__ = [
    "is_real_number",
    "validate_location",
    "validate_scale",
]
