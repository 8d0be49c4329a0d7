"""
Error types raised by lognormal_dist.
"""


class InvalidArgumentError(TypeError, ValueError):
    """
    Raised when a distribution parameter is not an acceptable value.

    Covers both wrong types (strings, booleans, ``None``) and out-of-range
    numbers (NaN, infinities, non-positive scales), so callers catching
    either ``TypeError`` or ``ValueError`` see it.
    """
