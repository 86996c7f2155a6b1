"""
Main Simulator class that drives the three-body integration.

Brings together ThreeBodyState, Integrator, GravitationalForce and
Observers into a simulation loop.
"""
import logging
from typing import TYPE_CHECKING, Iterator, List, Optional

if TYPE_CHECKING:
    from threebody.core import Snapshot, ThreeBodyState
    from threebody.force import GravitationalForce
    from threebody.integrator import Integrator
    from threebody.observer import Observer

logger = logging.getLogger(__name__)


class Simulator:
    """
    Fixed-step simulation driver.

    Orchestrates the simulation loop:
    1. Record the initial state with every observer
    2. For each step:
       a. Advance the three bodies
       b. Notify observers whose interval divides the step count
    3. Finalize observers

    Example:
        >>> sim = Simulator(
        ...     state=scenario.build_state(),
        ...     integrator=SequentialLeapfrog(dt=1e-4),
        ...     force=GravitationalForce(),
        ...     observers=[EnergyObserver(gravity), LogObserver(gravity)]
        ... )
        >>> sim.run_until(100.0)
    """

    def __init__(
        self,
        state: "ThreeBodyState",
        integrator: "Integrator",
        force: "GravitationalForce",
        observers: Optional[List["Observer"]] = None,
    ) -> None:
        """
        Initialize simulator.

        Args:
            state: The three-body state to evolve; owned by the simulator
                for the duration of the run.
            integrator: Time integration algorithm.
            force: Pairwise force law.
            observers: List of observers (optional).
        """
        self.state = state
        self.integrator = integrator
        self.force = force
        self.observers = observers or []

        self._initialized = False
        self._total_steps_run = 0

    def initialize(self) -> None:
        """
        Record the initial state with every observer.

        Called automatically by run() if not already done.
        """
        if not self._initialized:
            for observer in self.observers:
                observer.observe(self.state, self.state.step)
            self._initialized = True

    def _advance(self) -> None:
        self.integrator.step(self.state, self.force)
        self._total_steps_run += 1

        current_step = self.state.step
        for observer in self.observers:
            if current_step % observer.interval == 0:
                observer.observe(self.state, current_step)

    def run(self, num_steps: int) -> None:
        """
        Run the simulation for a given number of steps.

        Args:
            num_steps: Number of time steps to run.
        """
        if num_steps < 0:
            raise ValueError(f"Number of steps must be >= 0, got {num_steps}")

        self.initialize()
        logger.debug(
            "Running %d steps with %s, %s",
            num_steps,
            self.integrator.get_name(),
            self.force.get_name(),
        )

        for _ in range(num_steps):
            self._advance()

        for observer in self.observers:
            observer.finalize()

    def run_until(self, target_time: float) -> None:
        """
        Run simulation until a target simulation time.

        The number of steps is the remaining time divided by dt, truncated
        toward zero.

        Args:
            target_time: Target time in simulation units.
        """
        remaining_time = target_time - self.state.time
        num_steps = int(remaining_time / self.integrator.dt)
        if num_steps <= 0:
            return
        self.run(num_steps)

    def iter_snapshots(self, num_steps: int) -> Iterator["Snapshot"]:
        """
        Step the simulation lazily, yielding a snapshot after every step.

        Observers are notified as in run(); they are finalized once the
        generator is exhausted.

        Args:
            num_steps: Number of time steps to run.
        """
        self.initialize()
        for _ in range(num_steps):
            self._advance()
            yield self.state.snapshot()

        for observer in self.observers:
            observer.finalize()

    def get_total_steps(self) -> int:
        """Return total steps run so far."""
        return self._total_steps_run

    def reset(self) -> None:
        """Reset simulator bookkeeping (not the state)."""
        self._initialized = False
        self._total_steps_run = 0


class SimulatorBuilder:
    """
    Builder pattern for constructing Simulator instances.

    Example:
        >>> sim = (SimulatorBuilder()
        ...     .with_state(get_scenario("bumblebee").build_state())
        ...     .with_integrator(SequentialLeapfrog(dt=1e-4))
        ...     .with_force(GravitationalForce())
        ...     .add_observer(TrajectoryObserver(interval=100))
        ...     .build())
    """

    def __init__(self) -> None:
        """Initialize builder."""
        self._state: Optional["ThreeBodyState"] = None
        self._integrator: Optional["Integrator"] = None
        self._force: Optional["GravitationalForce"] = None
        self._observers: List["Observer"] = []

    def with_state(self, state: "ThreeBodyState") -> "SimulatorBuilder":
        """Set the initial state."""
        self._state = state
        return self

    def with_integrator(self, integrator: "Integrator") -> "SimulatorBuilder":
        """Set the integrator."""
        self._integrator = integrator
        return self

    def with_force(self, force: "GravitationalForce") -> "SimulatorBuilder":
        """Set the force law."""
        self._force = force
        return self

    def add_observer(self, observer: "Observer") -> "SimulatorBuilder":
        """Add an observer."""
        self._observers.append(observer)
        return self

    def build(self) -> Simulator:
        """
        Build the simulator.

        Returns:
            Configured Simulator instance.

        Raises:
            ValueError: If required components are missing.
        """
        if self._state is None:
            raise ValueError("State is required")
        if self._integrator is None:
            raise ValueError("Integrator is required")
        if self._force is None:
            raise ValueError("Force law is required")

        return Simulator(
            state=self._state,
            integrator=self._integrator,
            force=self._force,
            observers=self._observers,
        )
