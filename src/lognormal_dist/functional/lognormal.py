"""
Closed-form lognormal distribution functions.

Every function takes the location ``mu`` and scale ``sigma`` of the
underlying normal distribution, evaluates in float64 using
``torch.distributions.LogNormal`` where it provides the quantity and
``torch.special`` otherwise, and returns a Python float.

Invalid parameters (NaN ``mu``, NaN or non-positive ``sigma``) give NaN.
"""

import math
from typing import Optional, Tuple, Union

import torch
from torch.distributions import LogNormal

Number = Union[int, float, torch.Tensor]

DTYPE = torch.float64


def _as_tensor(value: Number) -> torch.Tensor:
    return torch.as_tensor(value, dtype=DTYPE)


def _params(mu: Number, sigma: Number) -> Optional[Tuple[torch.Tensor, torch.Tensor]]:
    """Convert parameters to tensors, or return None if they are out of domain."""
    mu_t = _as_tensor(mu)
    sigma_t = _as_tensor(sigma)
    if bool(torch.isnan(mu_t)) or bool(torch.isnan(sigma_t)) or bool(sigma_t <= 0.0):
        return None
    return mu_t, sigma_t


def _torch_distribution(mu_t: torch.Tensor, sigma_t: torch.Tensor) -> LogNormal:
    # Support checks are done here, not by torch
    return LogNormal(loc=mu_t, scale=sigma_t, validate_args=False)


def _keep_nan(out: torch.Tensor, x_t: torch.Tensor) -> float:
    """Propagate a NaN input through to the result."""
    return torch.where(torch.isnan(x_t), x_t, out).item()


# Summary statistics


def mean(mu: Number, sigma: Number) -> float:
    """Expected value, ``exp(mu + sigma^2 / 2)``."""
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    return _torch_distribution(*params).mean.item()


def median(mu: Number, sigma: Number) -> float:
    """Median, ``exp(mu)``."""
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    mu_t, _ = params
    return torch.exp(mu_t).item()


def mode(mu: Number, sigma: Number) -> float:
    """Mode, ``exp(mu - sigma^2)``."""
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    return _torch_distribution(*params).mode.item()


def variance(mu: Number, sigma: Number) -> float:
    """Variance, ``(exp(sigma^2) - 1) * exp(2 mu + sigma^2)``."""
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    mu_t, sigma_t = params
    s2 = sigma_t.square()
    return (torch.expm1(s2) * torch.exp(2.0 * mu_t + s2)).item()


def stdev(mu: Number, sigma: Number) -> float:
    """Standard deviation."""
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    mu_t, sigma_t = params
    s2 = sigma_t.square()
    return torch.sqrt(torch.expm1(s2) * torch.exp(2.0 * mu_t + s2)).item()


def skewness(mu: Number, sigma: Number) -> float:
    """Skewness, ``(exp(sigma^2) + 2) * sqrt(exp(sigma^2) - 1)``. Independent of ``mu``."""
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    _, sigma_t = params
    s2 = sigma_t.square()
    return ((torch.exp(s2) + 2.0) * torch.sqrt(torch.expm1(s2))).item()


def kurtosis(mu: Number, sigma: Number) -> float:
    """
    Excess kurtosis.

    ``exp(4 sigma^2) + 2 exp(3 sigma^2) + 3 exp(2 sigma^2) - 6``. Independent
    of ``mu``; overflows to inf once ``4 sigma^2`` exceeds the float64 range
    of ``exp`` (``sigma`` above roughly 13.3).
    """
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    _, sigma_t = params
    s2 = sigma_t.square()
    return (
        torch.exp(4.0 * s2) + 2.0 * torch.exp(3.0 * s2) + 3.0 * torch.exp(2.0 * s2) - 6.0
    ).item()


def entropy(mu: Number, sigma: Number) -> float:
    """Differential entropy in nats, ``mu + 1/2 + ln(sigma * sqrt(2 pi))``."""
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    return _torch_distribution(*params).entropy().item()


# Pointwise functions


def cdf(x: Number, mu: Number, sigma: Number) -> float:
    """
    Cumulative distribution function.

    Args:
        x: Input value.
        mu: Location parameter.
        sigma: Scale parameter.

    Returns:
        ``P(X <= x)``; 0 for ``x <= 0``.
    """
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    mu_t, sigma_t = params
    x_t = _as_tensor(x)
    z = (torch.log(x_t) - mu_t) / sigma_t
    out = torch.where(x_t > 0.0, torch.special.ndtr(z), torch.zeros_like(x_t))
    return _keep_nan(out, x_t)


def logcdf(x: Number, mu: Number, sigma: Number) -> float:
    """
    Natural logarithm of the cumulative distribution function.

    Uses ``log_ndtr`` so the lower tail stays finite where the CDF itself
    underflows to zero. Returns -inf for ``x <= 0``.
    """
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    mu_t, sigma_t = params
    x_t = _as_tensor(x)
    z = (torch.log(x_t) - mu_t) / sigma_t
    out = torch.where(
        x_t > 0.0, torch.special.log_ndtr(z), torch.full_like(x_t, -math.inf)
    )
    return _keep_nan(out, x_t)


def _logpdf_tensor(x_t: torch.Tensor, mu_t: torch.Tensor, sigma_t: torch.Tensor) -> torch.Tensor:
    log_prob = _torch_distribution(mu_t, sigma_t).log_prob(x_t)
    return torch.where(x_t > 0.0, log_prob, torch.full_like(x_t, -math.inf))


def logpdf(x: Number, mu: Number, sigma: Number) -> float:
    """
    Natural logarithm of the probability density function.

    Returns -inf for ``x <= 0``.
    """
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    x_t = _as_tensor(x)
    return _keep_nan(_logpdf_tensor(x_t, *params), x_t)


def pdf(x: Number, mu: Number, sigma: Number) -> float:
    """
    Probability density function.

    Returns 0 for ``x <= 0``.
    """
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    x_t = _as_tensor(x)
    return _keep_nan(torch.exp(_logpdf_tensor(x_t, *params)), x_t)


def quantile(p: Number, mu: Number, sigma: Number) -> float:
    """
    Quantile function (inverse CDF).

    Args:
        p: Probability in ``[0, 1]``.
        mu: Location parameter.
        sigma: Scale parameter.

    Returns:
        The value ``x`` with ``cdf(x) == p``; 0 at ``p == 0``, inf at
        ``p == 1`` and NaN for ``p`` outside ``[0, 1]``.
    """
    params = _params(mu, sigma)
    if params is None:
        return math.nan
    mu_t, sigma_t = params
    p_t = _as_tensor(p)
    in_range = (p_t >= 0.0) & (p_t <= 1.0)
    out = torch.exp(mu_t + sigma_t * torch.special.ndtri(p_t))
    return torch.where(in_range, out, torch.full_like(p_t, math.nan)).item()
