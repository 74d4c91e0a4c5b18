import numpy as np
import pytest
from types import SimpleNamespace
from kineticgraphic.geometry import as_point, linear_map, magnitude, normalize, step_toward

# -----------------------------------------------------------------------------
# Tests for as_point
# -----------------------------------------------------------------------------

def test_as_point_copies_array():
    """Mutating the source must not leak into the copy (and vice versa)."""
    src = np.array([1.0, 2.0])
    p = as_point(src)

    src[0] = 99.0
    assert np.allclose(p, [1.0, 2.0])
    assert p.dtype == np.float64

def test_as_point_accepts_tuples_and_xy_objects():
    assert np.allclose(as_point((3, 4)), [3.0, 4.0])
    assert np.allclose(as_point(SimpleNamespace(x=5, y=6)), [5.0, 6.0])

def test_as_point_rejects_wrong_shape():
    with pytest.raises(ValueError, match="2D point"):
        as_point((1, 2, 3))

# -----------------------------------------------------------------------------
# Tests for vector helpers
# -----------------------------------------------------------------------------

def test_magnitude_345():
    """Classic Pythagorean triple."""
    assert magnitude(np.array([3.0, 4.0])) == 5.0

def test_normalize_unit_length():
    v = normalize(np.array([300.0, 400.0]))
    assert np.allclose(v, [0.6, 0.8])

def test_normalize_zero_vector_stays_zero():
    """Should not crash (ZeroDivisionError / NaN) on a zero vector."""
    v = normalize(np.zeros(2))
    assert np.allclose(v, [0.0, 0.0])
    assert not np.isnan(v).any()

# -----------------------------------------------------------------------------
# Tests for linear_map
# -----------------------------------------------------------------------------

def test_linear_map_endpoints_and_midpoint():
    """Slow-down ramp: radius 120 -> max 1000, distance 0 -> min 10."""
    assert linear_map(120, 120, 0, 1000, 10) == pytest.approx(1000)
    assert linear_map(0, 120, 0, 1000, 10) == pytest.approx(10)
    assert linear_map(60, 120, 0, 1000, 10) == pytest.approx(505)

def test_linear_map_is_unclamped():
    assert linear_map(240, 120, 0, 1000, 10) == pytest.approx(1990)

# -----------------------------------------------------------------------------
# Tests for step_toward
# -----------------------------------------------------------------------------

def test_step_toward_partial_step():
    p = step_toward(np.array([0.0, 0.0]), np.array([10.0, 0.0]), 4.0)
    assert np.allclose(p, [4.0, 0.0])

def test_step_toward_never_overshoots():
    """A step budget larger than the remaining distance lands exactly on target."""
    p = step_toward(np.array([0.0, 0.0]), np.array([30.0, 40.0]), 1e9)
    assert np.allclose(p, [30.0, 40.0])

def test_step_toward_negative_budget_is_noop():
    p = step_toward(np.array([1.0, 1.0]), np.array([5.0, 5.0]), -3.0)
    assert np.allclose(p, [1.0, 1.0])
