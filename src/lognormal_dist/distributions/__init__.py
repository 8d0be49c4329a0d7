"""
Distribution objects.

Each object holds validated, mutable parameters and forwards statistics and
pointwise evaluations to the closed-form functions in
``lognormal_dist.functional``.
"""

from .base import ContinuousDistribution
from .lognormal import LogNormal

__all__ = [
    "ContinuousDistribution",
    "LogNormal",
]
