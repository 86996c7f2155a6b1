"""
Observer module for monitoring simulation progress.

Provides the Observer pattern for logging, trajectory recording
and conservation diagnostics during a run.
"""
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from threebody.core import Snapshot, ThreeBodyState
    from threebody.force import GravitationalForce

logger = logging.getLogger(__name__)


class Observer(ABC):
    """
    Abstract base for simulation observers (Observer Pattern).

    Observers are notified after a step to record properties or report
    progress. They only read the state.

    Attributes:
        interval: How often to call observe() (in steps).

    Example:
        >>> observer = EnergyObserver(gravity, interval=100)
        >>> if state.step % observer.interval == 0:
        ...     observer.observe(state, state.step)
    """

    def __init__(self, interval: int = 1) -> None:
        """
        Initialize observer.

        Args:
            interval: Observation interval in steps. Default=1 (every step).
        """
        if interval < 1:
            raise ValueError(f"Interval must be >= 1, got {interval}")
        self.interval = interval

    @abstractmethod
    def observe(self, state: "ThreeBodyState", step: int) -> None:
        """
        Record observation.

        Args:
            state: Current three-body state.
            step: Current step number.
        """
        pass

    def finalize(self) -> None:
        """Called at end of simulation for cleanup."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get observer name."""
        pass


class CompositeObserver(Observer):
    """
    Composite observer that wraps multiple observers.

    Delegates to child observers based on their individual intervals.
    """

    def __init__(self, observers: List[Observer]) -> None:
        super().__init__(interval=1)
        self.observers = observers

    def observe(self, state: "ThreeBodyState", step: int) -> None:
        """Delegate to child observers based on their intervals."""
        for obs in self.observers:
            if step % obs.interval == 0:
                obs.observe(state, step)

    def finalize(self) -> None:
        """Finalize all child observers."""
        for obs in self.observers:
            obs.finalize()

    def get_name(self) -> str:
        """Return composite name."""
        names = [o.get_name() for o in self.observers]
        return f"Composite[{', '.join(names)}]"


class EnergyObserver(Observer):
    """
    Records energy and momentum during simulation.

    Neither quantity feeds back into the integration; they are tracked to
    judge how well the scheme keeps the conserved quantities.
    """

    def __init__(self, force: "GravitationalForce", interval: int = 1) -> None:
        """
        Initialize energy observer.

        Args:
            force: Force law used to evaluate the potential energy.
            interval: Observation interval in steps.
        """
        super().__init__(interval)
        self.force = force
        self.steps: List[int] = []
        self.times: List[float] = []
        self.kinetic_energies: List[float] = []
        self.potential_energies: List[float] = []
        self.total_energies: List[float] = []
        self.momenta: List[NDArray[np.floating]] = []

    def observe(self, state: "ThreeBodyState", step: int) -> None:
        """Record energy and momentum."""
        kinetic = state.compute_kinetic_energy()
        potential = self.force.compute_potential_energy(state)

        self.steps.append(step)
        self.times.append(state.time)
        self.kinetic_energies.append(kinetic)
        self.potential_energies.append(potential)
        self.total_energies.append(kinetic + potential)
        self.momenta.append(state.get_momentum())

    def get_name(self) -> str:
        """Return observer name."""
        return f"EnergyObserver(interval={self.interval})"

    def get_energy_drift(self) -> float:
        """
        Compute relative energy drift.

        Returns:
            (E_final - E_initial) / |E_initial|
        """
        if len(self.total_energies) < 2:
            return 0.0
        E0 = self.total_energies[0]
        E_final = self.total_energies[-1]
        if abs(E0) < 1e-10:
            return 0.0
        return (E_final - E0) / abs(E0)

    def get_momentum_drift(self) -> float:
        """
        Compute absolute momentum drift.

        Returns:
            |P_final - P_initial|
        """
        if len(self.momenta) < 2:
            return 0.0
        return float(np.linalg.norm(self.momenta[-1] - self.momenta[0]))


class TrajectoryObserver(Observer):
    """
    Records snapshots in memory for a consumer to plot or analyse.
    """

    def __init__(self, interval: int = 100) -> None:
        super().__init__(interval)
        self.frames: List["Snapshot"] = []

    def observe(self, state: "ThreeBodyState", step: int) -> None:
        """Record frame."""
        self.frames.append(state.snapshot())

    def positions_array(self) -> NDArray[np.floating]:
        """
        Stack recorded positions.

        Returns:
            (n_frames, 3, 2) array of positions.
        """
        if not self.frames:
            return np.empty((0, 3, 2))
        return np.stack([frame.positions for frame in self.frames])

    def times(self) -> NDArray[np.floating]:
        """Return (n_frames,) array of frame times."""
        return np.array([frame.time for frame in self.frames], dtype=np.float64)

    def get_name(self) -> str:
        """Return observer name."""
        return f"TrajectoryObserver(interval={self.interval})"


class LogObserver(Observer):
    """
    Logs simulation progress.
    """

    def __init__(
        self,
        force: "GravitationalForce",
        interval: int = 10000,
        level: int = logging.INFO,
    ) -> None:
        super().__init__(interval)
        self.force = force
        self.level = level

    def observe(self, state: "ThreeBodyState", step: int) -> None:
        """Log step info."""
        kinetic = state.compute_kinetic_energy()
        potential = self.force.compute_potential_energy(state)
        momentum = state.get_momentum()
        logger.log(
            self.level,
            "Step %9d | t=%10.4f | KE=%12.6f | PE=%12.6f | E=%12.6f | |P|=%.3e",
            step,
            state.time,
            kinetic,
            potential,
            kinetic + potential,
            float(np.linalg.norm(momentum)),
        )

    def get_name(self) -> str:
        """Return observer name."""
        return f"LogObserver(interval={self.interval})"
