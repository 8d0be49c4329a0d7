"""
Public package facade for lognormal_dist.

Re-exports the distribution object, its configuration and the error type so
that ``from lognormal_dist import LogNormal`` works. The closed-form
functions are available as ``lognormal_dist.functional.lognormal``.
"""
from lognormal_dist.config import LogNormalConfig
from lognormal_dist.distributions import ContinuousDistribution, LogNormal
from lognormal_dist.errors import InvalidArgumentError
from lognormal_dist import functional  # noqa: F401

__all__ = [
    "ContinuousDistribution",
    "InvalidArgumentError",
    "LogNormal",
    "LogNormalConfig",
    "functional",
]
