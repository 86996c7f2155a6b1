"""
Observer module for three-body simulations.

Provides the Observer pattern for monitoring:
- EnergyObserver: Track energy and momentum
- TrajectoryObserver: Record snapshots
- LogObserver: Progress lines through logging
- CompositeObserver: Combine multiple observers
"""

from .observer import (
    CompositeObserver,
    EnergyObserver,
    LogObserver,
    Observer,
    TrajectoryObserver,
)

__all__ = [
    "Observer",
    "CompositeObserver",
    "EnergyObserver",
    "TrajectoryObserver",
    "LogObserver",
]
