import math

import pytest

torch = pytest.importorskip("torch")
np = pytest.importorskip("numpy")

from lognormal_dist import InvalidArgumentError, LogNormal
from lognormal_dist.functional import lognormal as F


INVALID_LOCATIONS = [
    "5",
    True,
    False,
    None,
    [],
    {},
    1 + 2j,
    lambda: None,
    math.nan,
    math.inf,
    -math.inf,
]

INVALID_SCALES = INVALID_LOCATIONS + [0.0, -1.0, -math.pi]


def test_default_parameters():
    dist = LogNormal()
    assert dist.mu == 0.0
    assert dist.sigma == 1.0


@pytest.mark.parametrize("mu, sigma", [(2.0, 4.0), (-3.5, 0.25), (0, 1), (1e300, 1e-300)])
def test_custom_parameters(mu, sigma):
    dist = LogNormal(mu, sigma)
    assert dist.mu == mu
    assert dist.sigma == sigma
    assert isinstance(dist.mu, float)
    assert isinstance(dist.sigma, float)


def test_keyword_parameters():
    dist = LogNormal(sigma=3.0, mu=-1.0)
    assert dist.mu == -1.0
    assert dist.sigma == 3.0


def test_numpy_and_tensor_parameters():
    dist = LogNormal(np.float64(1.5), torch.tensor(2.0))
    assert dist.mu == 1.5
    assert dist.sigma == 2.0


@pytest.mark.parametrize("kwargs", [{"mu": 1.0}, {"sigma": 1.0}])
def test_requires_both_parameters(kwargs):
    with pytest.raises(InvalidArgumentError):
        LogNormal(**kwargs)


def test_single_positional_argument_rejected():
    with pytest.raises(InvalidArgumentError):
        LogNormal(2.0)


@pytest.mark.parametrize("mu", INVALID_LOCATIONS)
def test_invalid_mu_rejected(mu):
    with pytest.raises(InvalidArgumentError, match="Location parameter must be a number"):
        LogNormal(mu, 1.0)


@pytest.mark.parametrize("sigma", INVALID_SCALES)
def test_invalid_sigma_rejected(sigma):
    with pytest.raises(InvalidArgumentError, match="Scale parameter must be a positive number"):
        LogNormal(0.0, sigma)


def test_error_is_type_and_value_error():
    with pytest.raises(TypeError):
        LogNormal("a", 1.0)
    with pytest.raises(ValueError):
        LogNormal(0.0, -1.0)


def test_mu_setter():
    dist = LogNormal(2.0, 4.0)
    dist.mu = 3.0
    assert dist.mu == 3.0
    dist.mu = -7
    assert dist.mu == -7.0


@pytest.mark.parametrize("value", INVALID_LOCATIONS)
def test_invalid_mu_assignment_keeps_previous_value(value):
    dist = LogNormal(2.0, 4.0)
    with pytest.raises(InvalidArgumentError, match="invalid assignment"):
        dist.mu = value
    assert dist.mu == 2.0


def test_sigma_setter():
    dist = LogNormal(2.0, 4.0)
    dist.sigma = 0.5
    assert dist.sigma == 0.5


@pytest.mark.parametrize("value", INVALID_SCALES)
def test_invalid_sigma_assignment_keeps_previous_value(value):
    dist = LogNormal(2.0, 4.0)
    with pytest.raises(InvalidArgumentError, match="invalid assignment"):
        dist.sigma = value
    assert dist.sigma == 4.0


def test_oversized_int_rejected_at_construction():
    with pytest.raises(InvalidArgumentError, match="Location parameter must be a number"):
        LogNormal(10**400, 1.0)
    with pytest.raises(InvalidArgumentError, match="Scale parameter must be a positive number"):
        LogNormal(0.0, 10**400)


def test_oversized_int_assignment_keeps_previous_value():
    dist = LogNormal(2.0, 4.0)
    with pytest.raises(InvalidArgumentError, match="invalid assignment"):
        dist.sigma = 10**400
    with pytest.raises(InvalidArgumentError, match="invalid assignment"):
        dist.mu = -10**400
    assert (dist.mu, dist.sigma) == (2.0, 4.0)


@pytest.mark.parametrize(
    "stat",
    ["entropy", "kurtosis", "mean", "median", "mode", "skewness", "stdev", "variance"],
)
def test_statistics_delegate(stat):
    dist = LogNormal(2.0, 4.0)
    assert getattr(dist, stat) == getattr(F, stat)(2.0, 4.0)


@pytest.mark.parametrize(
    "stat",
    ["entropy", "kurtosis", "mean", "median", "mode", "skewness", "stdev", "variance"],
)
def test_statistics_are_read_only(stat):
    dist = LogNormal()
    with pytest.raises(AttributeError):
        setattr(dist, stat, 1.0)


@pytest.mark.parametrize(
    "method, arg",
    [("cdf", 0.5), ("logcdf", 0.5), ("pdf", 0.8), ("logpdf", 0.8), ("quantile", 0.3)],
)
def test_evaluators_delegate(method, arg):
    dist = LogNormal()
    assert getattr(dist, method)(arg) == getattr(F, method)(arg, 0.0, 1.0)


def test_statistics_follow_parameter_updates():
    dist = LogNormal(1.0, 1.0)
    before = dist.mean
    dist.mu = 2.0
    dist.sigma = 0.5
    assert dist.mean != before
    assert dist.mean == F.mean(2.0, 0.5)
    assert dist.cdf(3.0) == F.cdf(3.0, 2.0, 0.5)
    assert dist.quantile(0.9) == F.quantile(0.9, 2.0, 0.5)


def test_cdf_and_mean_scenario():
    dist = LogNormal(1.0, 1.0)
    assert dist.cdf(1.5) == pytest.approx(0.276, abs=1e-3)
    assert dist.mean == pytest.approx(4.482, abs=1e-3)


def test_wide_scale_scenario():
    dist = LogNormal(4.0, 12.0)
    assert dist.entropy == pytest.approx(7.904, abs=1e-3)
    assert dist.kurtosis == pytest.approx(1.4243659274306933e250, rel=1e-9)
    assert dist.mean == pytest.approx(1.0148003881138887e33, rel=1e-12)
    assert dist.median == pytest.approx(54.598, abs=1e-3)
    assert dist.mode == pytest.approx(1.580420060273613e-61, rel=1e-12)
    assert dist.skewness == pytest.approx(6.421080152185613e93, rel=1e-9)
    assert dist.stdev == pytest.approx(1.886180808490652e64, rel=1e-9)
    assert dist.variance == pytest.approx(3.55767804231845e128, rel=1e-9)


def test_pointwise_scenario():
    dist = LogNormal(2.0, 4.0)
    assert dist.quantile(0.5) == pytest.approx(7.389, abs=1e-3)
    assert dist.cdf(0.5) == pytest.approx(0.25, abs=1e-3)
    assert dist.logcdf(0.5) == pytest.approx(-1.385, abs=1e-3)
    assert dist.pdf(0.8) == pytest.approx(0.107, abs=1e-3)
    assert dist.logpdf(0.8) == pytest.approx(-2.237, abs=1e-3)


def test_name_params_and_repr():
    dist = LogNormal(1.0, 2.0)
    assert dist.name == "LogNormal"
    assert dist.params() == {"mu": 1.0, "sigma": 2.0}
    assert repr(dist) == "LogNormal(mu=1.0, sigma=2.0)"
