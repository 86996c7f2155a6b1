"""
Unit tests for the gravitational force law.
"""
import numpy as np
import pytest

from threebody.core import Body, CoincidentBodiesError, ThreeBodyState
from threebody.force import GravitationalForce


def body(mass: float, x: float, y: float) -> Body:
    return Body(mass=mass, position=[x, y], velocity=[0.0, 0.0])


class TestGravitationalForce:
    """Tests for GravitationalForce.compute."""

    @pytest.fixture
    def gravity(self) -> GravitationalForce:
        return GravitationalForce()

    def test_default_constant(self, gravity: GravitationalForce) -> None:
        assert gravity.gravitational_constant == 1.0
        assert gravity.get_name() == "Gravity(G=1.0)"

    def test_inverse_square_magnitude(self, gravity: GravitationalForce) -> None:
        """Unit masses at distance 2 attract with 1/4."""
        force = gravity.compute(body(1.0, -1.0, 0.0), body(1.0, 1.0, 0.0))
        np.testing.assert_allclose(force, [0.25, 0.0])

    def test_points_toward_other_body(self, gravity: GravitationalForce) -> None:
        a = body(1.0, 0.0, 0.0)
        b = body(1.0, 3.0, 4.0)
        force = gravity.compute(a, b)
        direction = force / np.linalg.norm(force)
        np.testing.assert_allclose(direction, [0.6, 0.8])
        assert np.linalg.norm(force) == pytest.approx(1.0 / 25.0)

    def test_scales_with_both_masses(self, gravity: GravitationalForce) -> None:
        force = gravity.compute(body(2.0, 0.0, 0.0), body(3.0, 0.0, 1.0))
        np.testing.assert_allclose(force, [0.0, 6.0])

    @pytest.mark.parametrize(
        "a, b",
        [
            ((1.0, 0.0, 0.0), (1.0, 1.0, 0.0)),
            ((2.5, -0.3, 1.7), (0.4, 2.2, -0.9)),
            ((100.0, 0.0, 0.0), (1.0, -2.0, 0.0)),
            ((1e-4, 0.45, 0.45), (0.01, 0.5, 0.5)),
        ],
    )
    def test_newtons_third_law(self, gravity: GravitationalForce, a, b) -> None:
        """F(A, B) == -F(B, A)."""
        body_a = body(*a)
        body_b = body(*b)
        np.testing.assert_allclose(
            gravity.compute(body_a, body_b),
            -gravity.compute(body_b, body_a),
            rtol=1e-14,
            atol=0.0,
        )

    def test_gravitational_constant_scales_force(self) -> None:
        a = body(1.0, 0.0, 0.0)
        b = body(1.0, 1.0, 0.0)
        np.testing.assert_allclose(
            GravitationalForce(gravitational_constant=2.5).compute(a, b),
            2.5 * GravitationalForce().compute(a, b),
        )

    def test_pure_function(self, gravity: GravitationalForce) -> None:
        """Evaluation does not touch either body."""
        a = body(1.0, 0.0, 0.0)
        b = body(1.0, 1.0, 0.0)
        gravity.compute(a, b)
        np.testing.assert_array_equal(a.position, [0.0, 0.0])
        np.testing.assert_array_equal(a.acceleration, [0.0, 0.0])
        np.testing.assert_array_equal(b.position, [1.0, 0.0])

    def test_coincident_bodies_raise(self, gravity: GravitationalForce) -> None:
        with pytest.raises(CoincidentBodiesError):
            gravity.compute(body(1.0, 0.5, 0.5), body(1.0, 0.5, 0.5))

    def test_coincident_error_is_zero_division(self) -> None:
        assert issubclass(CoincidentBodiesError, ZeroDivisionError)

    def test_non_finite_constant_rejected(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            GravitationalForce(gravitational_constant=float("nan"))


class TestEnergy:
    """Tests for potential and total energy diagnostics."""

    def test_potential_energy(self) -> None:
        state = ThreeBodyState([
            body(1.0, -1.0, 0.0),
            body(1.0, 1.0, 0.0),
            body(1.0, 0.0, 0.0),
        ])
        # pairs at distances 2, 1, 1
        assert GravitationalForce().compute_potential_energy(state) == pytest.approx(-2.5)

    def test_total_energy(self) -> None:
        state = ThreeBodyState([
            Body(mass=1.0, position=[-1.0, 0.0], velocity=[1.0, 0.0]),
            body(1.0, 1.0, 0.0),
            body(2.0, 0.0, 3.0),
        ])
        gravity = GravitationalForce()
        expected = 0.5 - (0.5 + 2.0 / np.sqrt(10.0) + 2.0 / np.sqrt(10.0))
        assert gravity.compute_total_energy(state) == pytest.approx(expected)
