"""
Lognormal distribution object.

Holds a validated location ``mu`` and scale ``sigma`` and forwards every
statistic and evaluation to ``lognormal_dist.functional.lognormal``.
"""

from typing import Any, Dict

from ..errors import InvalidArgumentError
from ..functional import lognormal as F
from ..utils.validation import validate_location, validate_scale
from .base import ContinuousDistribution

_UNSET = object()


class LogNormal(ContinuousDistribution):
    """
    Lognormal distribution with location ``mu`` and scale ``sigma``.

    ``X`` is lognormal when ``log(X)`` is normal with mean ``mu`` and standard
    deviation ``sigma``. Both parameters stay mutable after construction;
    every assignment is revalidated.

    Args:
        mu: Location parameter, any finite real number. Defaults to 0.0.
        sigma: Scale parameter, a positive finite real number. Defaults to 1.0.

    Either both parameters are given or neither is.

    Raises:
        InvalidArgumentError: If only one parameter is given, or a parameter
            is out of range or not a real number.

    Example:
        >>> dist = LogNormal(1.0, 1.0)
        >>> round(dist.cdf(1.5), 3)
        0.276
        >>> round(dist.mean, 3)
        4.482
    """

    def __init__(self, mu: Any = _UNSET, sigma: Any = _UNSET):
        if mu is _UNSET and sigma is _UNSET:
            mu, sigma = 0.0, 1.0
        elif mu is _UNSET or sigma is _UNSET:
            raise InvalidArgumentError(
                "invalid arguments. Must provide both `mu` and `sigma` or neither."
            )
        self._mu = validate_location(
            mu, "invalid argument. Location parameter must be a number. Value: `{}`."
        )
        self._sigma = validate_scale(
            sigma, "invalid argument. Scale parameter must be a positive number. Value: `{}`."
        )

    @property
    def mu(self) -> float:
        """Location parameter."""
        return self._mu

    @mu.setter
    def mu(self, value: Any) -> None:
        self._mu = validate_location(value, "invalid assignment. Must be a number. Value: `{}`.")

    @property
    def sigma(self) -> float:
        """Scale parameter."""
        return self._sigma

    @sigma.setter
    def sigma(self, value: Any) -> None:
        self._sigma = validate_scale(
            value, "invalid assignment. Must be a positive number. Value: `{}`."
        )

    def params(self) -> Dict[str, float]:
        return {"mu": self._mu, "sigma": self._sigma}

    # Recomputed on every access since mu and sigma may change between reads

    @property
    def entropy(self) -> float:
        """Differential entropy."""
        return F.entropy(self._mu, self._sigma)

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis."""
        return F.kurtosis(self._mu, self._sigma)

    @property
    def mean(self) -> float:
        return F.mean(self._mu, self._sigma)

    @property
    def median(self) -> float:
        return F.median(self._mu, self._sigma)

    @property
    def mode(self) -> float:
        return F.mode(self._mu, self._sigma)

    @property
    def skewness(self) -> float:
        return F.skewness(self._mu, self._sigma)

    @property
    def stdev(self) -> float:
        """Standard deviation."""
        return F.stdev(self._mu, self._sigma)

    @property
    def variance(self) -> float:
        return F.variance(self._mu, self._sigma)

    def cdf(self, x: float) -> float:
        """Evaluate the cumulative distribution function at ``x``."""
        return F.cdf(x, self._mu, self._sigma)

    def logcdf(self, x: float) -> float:
        """Evaluate the natural logarithm of the CDF at ``x``."""
        return F.logcdf(x, self._mu, self._sigma)

    def pdf(self, x: float) -> float:
        """Evaluate the probability density function at ``x``."""
        return F.pdf(x, self._mu, self._sigma)

    def logpdf(self, x: float) -> float:
        """Evaluate the natural logarithm of the PDF at ``x``."""
        return F.logpdf(x, self._mu, self._sigma)

    def quantile(self, p: float) -> float:
        """Evaluate the quantile function (inverse CDF) at probability ``p``."""
        return F.quantile(p, self._mu, self._sigma)
