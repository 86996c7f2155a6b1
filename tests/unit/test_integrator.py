"""
Unit tests for integrator module.
"""
import math

import numpy as np
import pytest

from threebody.builder import get_scenario
from threebody.core import Body, ThreeBodyState
from threebody.force import GravitationalForce
from threebody.integrator import (
    STEP_ORDER,
    Integrator,
    SequentialLeapfrog,
    SymmetricLeapfrog,
    advance_body,
)

VX, VY = 0.18428, 0.58719


def bumblebee() -> ThreeBodyState:
    return get_scenario("bumblebee").build_state()


def reference_step(bodies, dt, G=1.0):
    """
    Scalar re-evaluation of one sequential step on plain lists.

    Each entry of ``bodies`` is [mass, x, y, vx, vy, ax, ay]; the
    arithmetic is written out component by component in the same order
    as the integrator so results must agree bit for bit.
    """
    def force(b1, b2):
        dx = b2[1] - b1[1]
        dy = b2[2] - b1[2]
        r = math.sqrt(dx * dx + dy * dy)
        r_cubed = r * r * r
        return G * b1[0] * b2[0] * dx / r_cubed, G * b1[0] * b2[0] * dy / r_cubed

    def advance(b, o1, o2):
        fx1, fy1 = force(b, o1)
        fx2, fy2 = force(b, o2)
        b[5] = (fx1 + fx2) / b[0]
        b[6] = (fy1 + fy2) / b[0]
        b[3] += 0.5 * b[5] * dt
        b[4] += 0.5 * b[6] * dt
        b[1] += b[3] * dt
        b[2] += b[4] * dt
        fx1, fy1 = force(b, o1)
        fx2, fy2 = force(b, o2)
        b[5] = (fx1 + fx2) / b[0]
        b[6] = (fy1 + fy2) / b[0]
        b[3] += 0.5 * b[5] * dt
        b[4] += 0.5 * b[6] * dt

    b1, b2, b3 = bodies
    advance(b1, b2, b3)
    advance(b2, b1, b3)
    advance(b3, b1, b2)


def as_rows(state: ThreeBodyState):
    return [
        [b.mass, float(b.position[0]), float(b.position[1]),
         float(b.velocity[0]), float(b.velocity[1]), 0.0, 0.0]
        for b in state
    ]


class TestIntegratorBase:
    """Tests for the Integrator ABC contract."""

    @pytest.mark.parametrize("cls", [SequentialLeapfrog, SymmetricLeapfrog])
    def test_zero_timestep_rejected(self, cls) -> None:
        with pytest.raises(ValueError, match="non-zero"):
            cls(dt=0.0)

    @pytest.mark.parametrize("dt", [float("nan"), float("inf")])
    def test_non_finite_timestep_rejected(self, dt: float) -> None:
        with pytest.raises(ValueError):
            SequentialLeapfrog(dt=dt)

    def test_negative_timestep_allowed(self) -> None:
        """Negative dt integrates backwards."""
        assert SequentialLeapfrog(dt=-1e-3).dt == -1e-3

    def test_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Integrator(dt=0.1)

    def test_names(self) -> None:
        assert SequentialLeapfrog(dt=0.001).get_name() == "SequentialLeapfrog(dt=0.001)"
        assert SymmetricLeapfrog(dt=0.001).get_name() == "SymmetricLeapfrog(dt=0.001)"


class TestAdvanceBody:
    """Tests for the single-body kick-drift-kick update."""

    def test_only_mutates_self(self) -> None:
        state = bumblebee()
        before = state.copy()
        advance_body(state[0], state[1], state[2], 1e-3, GravitationalForce())

        for i in (1, 2):
            np.testing.assert_array_equal(state[i].position, before[i].position)
            np.testing.assert_array_equal(state[i].velocity, before[i].velocity)
            np.testing.assert_array_equal(state[i].acceleration, [0.0, 0.0])
        assert not np.array_equal(state[0].position, before[0].position)

    def test_first_step_by_hand(self) -> None:
        """
        Body1 at (-1, 0) feels 1/4 from body2 at distance 2 and 1 from
        body3 at distance 1, so a = (1.25, 0) before the drift.
        """
        dt = 1e-4
        state = bumblebee()
        advance_body(state[0], state[1], state[2], dt, GravitationalForce())

        x = -1.0 + (VX + 0.5 * 1.25 * dt) * dt
        y = VY * dt
        assert state[0].position[0] == pytest.approx(x, rel=1e-12)
        assert state[0].position[1] == pytest.approx(y, rel=1e-12)
        assert state[0].position[0] == pytest.approx(-0.99998156575, rel=1e-12)

    def test_acceleration_is_from_post_drift_position(self) -> None:
        dt = 1e-3
        state = bumblebee()
        gravity = GravitationalForce()
        advance_body(state[0], state[1], state[2], dt, gravity)

        expected = (
            gravity.compute(state[0], state[1]) + gravity.compute(state[0], state[2])
        ) / state[0].mass
        np.testing.assert_array_equal(state[0].acceleration, expected)

    def test_free_body_drifts(self) -> None:
        """With negligible neighbours the body moves in a straight line."""
        far = 1e9
        body = Body(mass=1.0, position=[0.0, 0.0], velocity=[1.0, -2.0])
        others = (
            Body(mass=1e-12, position=[far, 0.0], velocity=[0.0, 0.0]),
            Body(mass=1e-12, position=[0.0, far], velocity=[0.0, 0.0]),
        )
        advance_body(body, *others, 0.5, GravitationalForce())
        np.testing.assert_allclose(body.position, [0.5, -1.0], atol=1e-12)
        np.testing.assert_allclose(body.velocity, [1.0, -2.0], atol=1e-12)


class TestSequentialLeapfrog:
    """Tests for the chained three-body step."""

    def test_step_order(self) -> None:
        assert STEP_ORDER == ((0, 1, 2), (1, 0, 2), (2, 0, 1))

    def test_bumblebee_first_step_matches_reference(self) -> None:
        """One step of the bumblebee case, bit for bit."""
        dt = 1e-4
        state = bumblebee()
        rows = as_rows(state)

        SequentialLeapfrog(dt=dt).step(state, GravitationalForce())
        reference_step(rows, dt)

        # body1 after one step at dt = 1e-4, to the last bit
        assert state[0].position[0] == float.fromhex("-0x1.fffd9572ff8d2p-1")
        assert state[0].position[1] == float.fromhex("0x1.ec9217a2bc8bap-15")
        assert state[0].position[0] == rows[0][1]
        assert state[0].position[1] == rows[0][2]
        for body, row in zip(state, rows):
            assert body.position.tolist() == row[1:3]
            assert body.velocity.tolist() == row[3:5]
            assert body.acceleration.tolist() == row[5:7]

    def test_many_steps_match_reference(self) -> None:
        dt = 1e-3
        state = get_scenario("chaos_1").build_state()
        rows = as_rows(state)
        integrator = SequentialLeapfrog(dt=dt)
        gravity = GravitationalForce()

        for _ in range(500):
            integrator.step(state, gravity)
            reference_step(rows, dt)

        for body, row in zip(state, rows):
            assert body.position.tolist() == row[1:3]
            assert body.velocity.tolist() == row[3:5]

    def test_gravitational_constant_is_used(self) -> None:
        dt = 1e-3
        state = bumblebee()
        rows = as_rows(state)
        SequentialLeapfrog(dt=dt).step(state, GravitationalForce(gravitational_constant=0.5))
        reference_step(rows, dt, G=0.5)
        assert state[2].velocity.tolist() == rows[2][3:5]

    def test_later_bodies_see_updated_positions(self) -> None:
        """Body2 is advanced against body1's already-advanced position."""
        dt = 1e-3
        gravity = GravitationalForce()

        chained = bumblebee()
        SequentialLeapfrog(dt=dt).step(chained, gravity)

        stale = bumblebee()
        frozen_body1 = stale[0].copy()
        advance_body(stale[1], frozen_body1, stale[2], dt, gravity)
        assert not np.array_equal(chained[1].velocity, stale[1].velocity)

        manual = bumblebee()
        advance_body(manual[0], manual[1], manual[2], dt, gravity)
        advance_body(manual[1], manual[0], manual[2], dt, gravity)
        advance_body(manual[2], manual[0], manual[1], dt, gravity)
        for a, b in zip(chained, manual):
            np.testing.assert_array_equal(a.position, b.position)
            np.testing.assert_array_equal(a.velocity, b.velocity)

    def test_advances_clock(self) -> None:
        state = bumblebee()
        integrator = SequentialLeapfrog(dt=0.25)
        gravity = GravitationalForce()
        integrator.step(state, gravity)
        integrator.step(state, gravity)
        assert state.step == 2
        assert state.time == pytest.approx(0.5)

    def test_masses_never_change(self) -> None:
        state = get_scenario("small_orbiter").build_state()
        integrator = SequentialLeapfrog(dt=1e-3)
        gravity = GravitationalForce()
        for _ in range(100):
            integrator.step(state, gravity)
        np.testing.assert_array_equal(state.masses(), [1.0, 1.5, 0.5])


class TestConservation:
    """Long-run behaviour of the sequential scheme."""

    def test_two_body_circular_orbit(self) -> None:
        """
        Equal unit masses at (+-1, 0) with v^2 = G*m / (2*d), d = 2, keep
        their separation; the third body is light and far away.
        """
        speed = math.sqrt(1.0 * 1.0 / (2 * 2.0))
        state = ThreeBodyState([
            Body(mass=1.0, position=[1.0, 0.0], velocity=[0.0, speed]),
            Body(mass=1.0, position=[-1.0, 0.0], velocity=[0.0, -speed]),
            Body(mass=1e-12, position=[1000.0, 1000.0], velocity=[0.0, 0.0]),
        ])
        integrator = SequentialLeapfrog(dt=1e-4)
        gravity = GravitationalForce()

        for step in range(10000):
            integrator.step(state, gravity)
            if step % 500 == 0:
                separation = state[0].distance_to(state[1])
                assert separation == pytest.approx(2.0, rel=1e-3)

        assert state[0].distance_to(state[1]) == pytest.approx(2.0, rel=1e-3)
        # the pair has rotated, not just sat still
        assert state[0].position[1] > 0.4

    def test_time_reversal(self) -> None:
        """N steps forward then N steps with -dt return close to the start."""
        dt = 1e-4
        gravity = GravitationalForce()
        state = bumblebee()
        initial = state.copy()

        forward = SequentialLeapfrog(dt=dt)
        backward = SequentialLeapfrog(dt=-dt)
        for _ in range(100):
            forward.step(state, gravity)
        moved = np.max(np.abs(state.positions() - initial.positions()))
        for _ in range(100):
            backward.step(state, gravity)

        np.testing.assert_allclose(state.positions(), initial.positions(), atol=1e-6)
        np.testing.assert_allclose(state.velocities(), initial.velocities(), atol=1e-4)
        assert np.max(np.abs(state.positions() - initial.positions())) < moved * 1e-3
        assert state.time == pytest.approx(0.0, abs=1e-12)
        assert state.step == 200

    def test_momentum_drift_bounded(self) -> None:
        """The chained order does not conserve momentum exactly, but it stays small."""
        gravity = GravitationalForce()
        state = bumblebee()
        p0 = state.get_momentum()
        e0 = gravity.compute_total_energy(state)
        integrator = SequentialLeapfrog(dt=1e-4)

        for _ in range(10000):
            integrator.step(state, gravity)

        assert np.linalg.norm(state.get_momentum() - p0) < 1e-2
        e1 = gravity.compute_total_energy(state)
        assert abs((e1 - e0) / e0) < 5e-3


class TestSymmetricLeapfrog:
    """Tests for the whole-system comparison scheme."""

    def test_conserves_momentum(self) -> None:
        gravity = GravitationalForce()
        state = bumblebee()
        integrator = SymmetricLeapfrog(dt=1e-3)
        for _ in range(1000):
            integrator.step(state, gravity)
        np.testing.assert_allclose(state.get_momentum(), [0.0, 0.0], atol=1e-10)

    def test_uses_consistent_snapshot(self) -> None:
        """All three first kicks use pre-step positions."""
        dt = 1e-3
        gravity = GravitationalForce()
        state = bumblebee()
        start = state.copy()
        SymmetricLeapfrog(dt=dt).step(state, gravity)

        for i, (index, a, b) in enumerate(STEP_ORDER):
            acc0 = (
                gravity.compute(start[index], start[a]) + gravity.compute(start[index], start[b])
            ) / start[index].mass
            expected = start[index].position + (start[index].velocity + 0.5 * acc0 * dt) * dt
            np.testing.assert_array_equal(state[i].position, expected)

    def test_sequential_and_symmetric_diverge(self) -> None:
        """The chained order produces a different trajectory."""
        dt = 1e-4
        gravity = GravitationalForce()
        sequential = bumblebee()
        symmetric = bumblebee()
        seq_integrator = SequentialLeapfrog(dt=dt)
        sym_integrator = SymmetricLeapfrog(dt=dt)

        for _ in range(1000):
            seq_integrator.step(sequential, gravity)
            sym_integrator.step(symmetric, gravity)

        difference = np.max(np.abs(sequential.velocities() - symmetric.velocities()))
        assert difference > 1e-10
        # both are consistent integrators of the same problem
        assert difference < 1e-3
        assert not np.array_equal(sequential.positions(), symmetric.positions())
