import numpy as np
import pytest

from hoeffding_sim.config import (
    DEFAULT_EPSILONS,
    ConfigurationError,
    EmptyDistributionError,
    SimulationParams,
    get_rng,
    require_epsilons,
    require_positive_int,
)


def test_default_epsilons():
    assert len(DEFAULT_EPSILONS) == 11
    assert DEFAULT_EPSILONS[0] == 0.0
    assert DEFAULT_EPSILONS[-1] == 1.0
    assert DEFAULT_EPSILONS[3] == 0.3


def test_default_params_are_valid():
    params = SimulationParams().validate()
    assert params.num_trials == 100_000
    assert params.num_flips == 10
    assert params.population_size == 1000


@pytest.mark.parametrize("field", ["num_trials", "num_flips", "population_size"])
@pytest.mark.parametrize("value", [0, -3, 2.5, True, "10"])
def test_invalid_params(field, value):
    with pytest.raises(ConfigurationError, match=field):
        SimulationParams(**{field: value}).validate()


def test_numpy_integers_accepted():
    assert require_positive_int("n", np.int64(5)) == 5


def test_error_hierarchy():
    assert issubclass(ConfigurationError, ValueError)
    assert issubclass(EmptyDistributionError, ArithmeticError)


def test_require_epsilons():
    assert require_epsilons([0, 0.5, 0.5]) == (0.0, 0.5, 0.5)
    with pytest.raises(ConfigurationError):
        require_epsilons([])
    with pytest.raises(ConfigurationError):
        require_epsilons([0.1, -0.2])


def test_get_rng_is_reproducible():
    a = get_rng(7).integers(1_000_000, size=5)
    b = get_rng(7).integers(1_000_000, size=5)
    np.testing.assert_array_equal(a, b)
