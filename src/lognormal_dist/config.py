"""
Configuration for lognormal distributions.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .distributions import LogNormal
from .utils.validation import validate_location, validate_scale

# Defaults used when no parameters are given
DEFAULT_MU = 0.0
DEFAULT_SIGMA = 1.0


@dataclass
class LogNormalConfig:
    """Configuration for a lognormal distribution."""

    mu: float = DEFAULT_MU
    sigma: float = DEFAULT_SIGMA

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.mu = validate_location(
            self.mu, "invalid argument. Location parameter must be a number. Value: `{}`."
        )
        self.sigma = validate_scale(
            self.sigma, "invalid argument. Scale parameter must be a positive number. Value: `{}`."
        )

    def get_distribution_kwargs(self) -> Dict[str, Any]:
        return asdict(self)

    def build(self) -> LogNormal:
        return LogNormal(**self.get_distribution_kwargs())
