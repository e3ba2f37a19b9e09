import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal
from pidcore.controllers import ScalarController, VectorController, PIDController
from pidcore.domains import VectorDomain
from pidcore.modes import Mode

GAINS = dict(p=2.0, i=0.5, d=1.0, max_out=8.0)


def test_axes_match_scalar_controllers():
    vec = VectorController(**GAINS)
    scalars = [ScalarController(**GAINS) for _ in range(3)]
    seq = [((5.0, 0.0, -5.0), 0.1), ((4.0, 0.5, -6.0), 0.2), ((1.0, -2.0, 0.0), 0.05)]
    for err, dt in seq:
        out = vec.update(np.array(err), dt)
        expected = [c.update(e, dt) for c, e in zip(scalars, err)]
        assert_allclose(out, expected)
    assert_allclose(vec.integral_error, [c.integral_error for c in scalars])


def test_cube_clamp_not_norm():
    c = VectorController(p=10.0, max_out=1.0)
    out = c.update([0.05, 0.5, -3.0], 0.1)
    assert_allclose(out, [0.5, 1.0, -1.0])


@pytest.mark.parametrize("mode_gains", [(1, 0, 0), (1, 1, 0), (1, 0, 1), (1, 1, 1), (0, 0, 0)])
def test_vector_output_bounded(mode_gains):
    p, i, d = mode_gains
    c = VectorController(p=p, i=i, d=d, max_out=0.75)
    rng = np.random.default_rng(1)
    for _ in range(200):
        out = c.update(rng.normal(scale=5.0, size=3), rng.uniform(0.01, 0.2))
        assert np.all(np.abs(out) <= 0.75)


def test_fallback_returns_zero_vector():
    c = VectorController(0.0, 0.0, 0.0, 10.0)
    assert c.mode is Mode.PID
    assert_array_equal(c.update([3.0, -1.0, 2.0], 0.5), np.zeros(3))


def test_pd_vector_keeps_integral_zero():
    c = VectorController(p=1.0, d=1.0, max_out=10.0)
    c.update([1.0, 2.0, 3.0], 0.1)
    assert_array_equal(c.integral_error, np.zeros(3))
    assert_array_equal(c.previous_error, [1.0, 2.0, 3.0])


def test_state_is_not_aliased_with_caller_arrays():
    c = VectorController(p=1.0, i=1.0, d=1.0, max_out=10.0)
    err = np.array([1.0, 1.0, 1.0])
    c.update(err, 1.0)
    err[:] = 99.0
    assert_array_equal(c.previous_error, [1.0, 1.0, 1.0])
    view = c.integral_error
    view[:] = -5.0
    assert_array_equal(c.integral_error, [1.0, 1.0, 1.0])


def test_nan_axis_saturates_only_on_that_axis():
    c = VectorController(p=1.0, max_out=2.0)
    out = c.update([np.nan, 1.0, -5.0], 0.1)
    assert_allclose(out, [2.0, 1.0, -2.0])


def test_guarded_vector_zero_on_nan():
    c = VectorController(p=1.0, max_out=2.0, guarded=True)
    assert_array_equal(c.update([np.nan, 1.0, 0.0], 0.1), np.zeros(3))


def test_wrong_shape_rejected():
    c = VectorController(p=1.0, max_out=1.0)
    with pytest.raises(ValueError):
        c.update([1.0, 2.0], 0.1)


def test_generic_controller_other_sizes():
    c = PIDController(p=1.0, max_out=1.0, domain=VectorDomain(2))
    assert_allclose(c.update([0.5, 3.0], 0.1), [0.5, 1.0])


def test_vector_reset_matches_fresh_controller():
    c = VectorController(**GAINS)
    for err in ([1.0, -2.0, 3.0], [0.5, 0.5, -1.0]):
        c.update(err, 0.1)
    c.reset()
    assert_array_equal(c.integral_error, np.zeros(3))
    assert_array_equal(c.previous_error, np.zeros(3))
    fresh = VectorController(**GAINS)
    assert_allclose(c.update([2.0, 0.0, -2.0], 0.2), fresh.update([2.0, 0.0, -2.0], 0.2))
    assert c.mode is Mode.PID


def test_vector_configure_keeps_or_clears_errors():
    c = VectorController(p=1.0, i=1.0, d=1.0, max_out=100.0)
    c.update([1.0, 2.0, 3.0], 1.0)
    c.configure(1.0, 1.0, 0.0, 100.0, clear_errors=False)
    assert c.mode is Mode.PI
    assert_array_equal(c.integral_error, [1.0, 2.0, 3.0])
    assert_array_equal(c.previous_error, [1.0, 2.0, 3.0])
    # I_err = [2, 2, 3] -> e + I_err
    assert_allclose(c.update([1.0, 0.0, 0.0], 1.0), [3.0, 2.0, 3.0])
    c.configure(1.0, 1.0, 0.0, 100.0)
    assert_array_equal(c.integral_error, np.zeros(3))
    assert_array_equal(c.previous_error, np.zeros(3))


def test_vector_nan_output_stays_inside_cube():
    c = VectorController(p=1.0, d=1.0, max_out=2.0)
    c.update([1.0, 0.0, -1.0], 0.0)
    out = c.update([1.0, 0.0, -1.0], 0.0)   # 0/0 en todos los ejes
    assert np.all(np.abs(out) <= 2.0)
