"""
Closed-form functions of supported distributions.

Functions take scalar arguments and return Python floats; they never raise
for out-of-domain inputs and return NaN instead.
"""

from . import lognormal

__all__ = ["lognormal"]
