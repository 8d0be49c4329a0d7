"""
Parameter validators shared by the distribution objects and their configs.

Each validator returns the accepted value as a plain ``float`` or raises
``InvalidArgumentError`` with the caller's message, formatted with the
offending value.
"""

import math
import numbers
from typing import Any

import torch

from ..errors import InvalidArgumentError


def is_real_number(value: Any) -> bool:
    """Return True for real scalars (not bool) and single-element real tensors."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Real):
        return True
    if torch.is_tensor(value):
        return (
            value.numel() == 1
            and value.dtype != torch.bool
            and not value.is_complex()
        )
    return False


def _to_float(value: Any) -> float:
    if torch.is_tensor(value):
        return float(value.item())
    return float(value)


def validate_location(value: Any, message: str) -> float:
    """
    Validate a location-style parameter: any finite real number.

    Args:
        value: Candidate value.
        message: Error message template; ``{}`` is replaced by ``value``.

    Returns:
        The value as a float.
    """
    if not is_real_number(value):
        raise InvalidArgumentError(message.format(value))
    try:
        value_f = _to_float(value)
    except (OverflowError, ValueError) as exc:
        raise InvalidArgumentError(message.format(value)) from exc
    if not math.isfinite(value_f):
        raise InvalidArgumentError(message.format(value))
    return value_f


def validate_scale(value: Any, message: str) -> float:
    """
    Validate a scale-style parameter: a strictly positive finite real number.

    Args:
        value: Candidate value.
        message: Error message template; ``{}`` is replaced by ``value``.

    Returns:
        The value as a float.
    """
    value_f = validate_location(value, message)
    if value_f <= 0.0:
        raise InvalidArgumentError(message.format(value))
    return value_f
