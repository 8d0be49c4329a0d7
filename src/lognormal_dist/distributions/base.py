"""
Base class for univariate continuous distributions.
"""

from abc import ABC, abstractmethod
from typing import Dict


class ContinuousDistribution(ABC):
    """
    Abstract base class for lognormal_dist distributions.

    Requirements:
    - params(): current parameter values, keyed by parameter name
    - cdf(), logcdf(), pdf(), logpdf(): pointwise evaluation at a real input
    - quantile(): inverse CDF at a probability
    """

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def params(self) -> Dict[str, float]:
        raise NotImplementedError

    @abstractmethod
    def cdf(self, x: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def logcdf(self, x: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def pdf(self, x: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def logpdf(self, x: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def quantile(self, p: float) -> float:
        raise NotImplementedError

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in self.params().items())
        return f"{self.name}({args})"
