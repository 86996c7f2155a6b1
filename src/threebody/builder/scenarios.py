"""
Catalogue of initial conditions.

Each scenario describes three bodies by mass, position and velocity in
normalized units (G = 1). The collinear family places bodies 1 and 2 at
(-1, 0) and (1, 0) and body 3 at the origin, with velocities (vx, vy),
(vx, vy) and (-2vx, -2vy), as tabulated by Suvakov & Dmitrasinovic,
"Three classes of Newtonian three-body planar periodic orbits",
arXiv:1303.0181.
"""
import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from threebody.core import Body, ThreeBodyState

Vector = Tuple[float, float]


@dataclass(frozen=True)
class BodySpec:
    """Initial mass, position and velocity of one body."""
    mass: float
    position: Vector
    velocity: Vector
    name: str = ""

    def build(self) -> Body:
        return Body(
            mass=self.mass,
            position=self.position,
            velocity=self.velocity,
            name=self.name,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "mass": self.mass,
            "position": list(self.position),
            "velocity": list(self.velocity),
        }


@dataclass(frozen=True)
class Scenario:
    """
    Named set of initial conditions.

    Attributes:
        name: Catalogue key.
        description: One-line summary.
        bodies: Three BodySpec entries, in stepping order.
        extent: Half-width of a square plot window that frames the orbit.
    """
    name: str
    description: str
    bodies: Tuple[BodySpec, BodySpec, BodySpec]
    extent: float = 1.5

    def build_state(self) -> ThreeBodyState:
        """Create fresh Body instances and wrap them in a state."""
        return ThreeBodyState([spec.build() for spec in self.bodies])

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "extent": self.extent,
            "bodies": [spec.to_dict() for spec in self.bodies],
        }


def _bodies(*specs: Tuple[float, float, float, float, float]) -> Tuple[BodySpec, ...]:
    """Build BodySpecs from (mass, x, y, vx, vy) rows."""
    return tuple(
        BodySpec(mass=m, position=(x, y), velocity=(vx, vy), name=f"body{i + 1}")
        for i, (m, x, y, vx, vy) in enumerate(specs)
    )


def collinear_scenario(
    name: str,
    vx: float,
    vy: float,
    description: str = "",
    extent: float = 1.5,
) -> Scenario:
    """
    Equal unit masses at (-1, 0), (1, 0), (0, 0) with zero total momentum.

    Args:
        name: Scenario name.
        vx: x velocity of the two outer bodies.
        vy: y velocity of the two outer bodies.
        description: One-line summary.
        extent: Plot half-width.
    """
    return Scenario(
        name=name,
        description=description or f"Collinear isosceles orbit (vx={vx}, vy={vy})",
        bodies=_bodies(
            (1.0, -1.0, 0.0, vx, vy),
            (1.0, 1.0, 0.0, vx, vy),
            (1.0, 0.0, 0.0, -2.0 * vx, -2.0 * vy),
        ),
        extent=extent,
    )


def _circle(scale: float = 0.7) -> Scenario:
    half_root3 = math.sqrt(3) / 2
    return Scenario(
        name="circle",
        description="Equal masses on an equilateral triangle with tangential velocities",
        bodies=_bodies(
            (1.0, 1.0, 0.0, 0.0, scale * 1.0),
            (1.0, -0.5, half_root3, scale * -half_root3, scale * -0.5),
            (1.0, -0.5, -half_root3, scale * half_root3, scale * -0.5),
        ),
    )


_SCENARIOS: Dict[str, Scenario] = {
    scenario.name: scenario
    for scenario in (
        _circle(),
        Scenario(
            name="chaos_1",
            description="Unstructured equal-mass orbit, sensitive to small mass changes",
            bodies=_bodies(
                (1.0, 0.5, 0.0, 1.0, 1.0),
                (1.0, 1.0, 0.1, -0.3, -0.2),
                (1.0, -0.5, -1.0, -0.5, 0.5),
            ),
        ),
        Scenario(
            name="small_orbiter",
            description="Light body orbiting a heavier one while perturbing a third",
            bodies=_bodies(
                (1.0, 0.5, 0.0, 1.0, 0.2),
                (1.5, 0.3, 0.1, -0.5, -0.5),
                (0.5, -0.2, -1.3, -0.4, 0.5),
            ),
        ),
        Scenario(
            name="chaos_2",
            description="Equal-mass orbit, sensitive to small position changes",
            bodies=_bodies(
                (1.0, 0.5, 0.0, 0.7, 0.4),
                (1.0, -0.5, 0.1, 0.4, -0.6),
                (1.0, 0.5, -0.9, 0.8, -0.6),
            ),
        ),
        Scenario(
            name="large_mass",
            description="Two light bodies orbiting a heavy body at rest",
            bodies=_bodies(
                (100.0, 0.0, 0.0, 0.0, 0.0),
                (1.0, -2.0, 0.0, 0.0, 5.0),
                (1.0, 2.0, 0.0, 0.0, -5.0),
            ),
            extent=3.0,
        ),
        Scenario(
            name="fast_moving",
            description="Fast, very unequal masses",
            bodies=_bodies(
                (1.0, -1.0, -1.0, 0.01, 0.01),
                (0.01, 0.5, 0.5, 1.0, -1.0),
                (0.0001, 0.45, 0.45, 3.0, 0.0),
            ),
        ),
        collinear_scenario(
            "yin_yang", 0.51394, 0.30474, description="II.C.2a yin-yang I"
        ),
        collinear_scenario(
            "goggles", 0.08330, 0.12789, description="I.B.5 goggles"
        ),
        collinear_scenario(
            "bumblebee", 0.18428, 0.58719, description="I.A.3 bumblebee (long period)"
        ),
        Scenario(
            name="figure_eight",
            description="Chenciner-Montgomery figure-eight choreography",
            bodies=_bodies(
                (1.0, -0.97000436, 0.24208753, 0.4662036850, 0.4323657300),
                (1.0, 0.0, 0.0, -0.9324073700, -0.8647314600),
                (1.0, 0.97000436, -0.24208753, 0.4662036850, 0.4323657300),
            ),
        ),
    )
}

DEFAULT_SCENARIO = "bumblebee"


def list_scenarios() -> List[str]:
    """Return the names of all catalogued scenarios."""
    return sorted(_SCENARIOS)


def get_scenario(name: str) -> Scenario:
    """
    Look up a scenario by name.

    Raises:
        TypeError: If name is not a string.
        KeyError: If the name is unknown.
    """
    if not isinstance(name, str):
        raise TypeError(f"Scenario name must be a string, got {type(name).__name__}")
    key = name.strip().lower()
    if key not in _SCENARIOS:
        raise KeyError(
            f"Unknown scenario '{name}'. Choose from: {', '.join(list_scenarios())}"
        )
    return _SCENARIOS[key]


def state_from_bodies(configs: Sequence[dict]) -> ThreeBodyState:
    """
    Build a state from a list of body dictionaries.

    Each entry needs ``mass``, ``position`` and ``velocity``; ``name`` is
    optional.

    Raises:
        ValueError: If the list does not hold three well-formed bodies.
    """
    if not isinstance(configs, (list, tuple)):
        raise ValueError(f"Bodies must be a list, got {type(configs).__name__}")
    if len(configs) != 3:
        raise ValueError(f"Expected 3 bodies, got {len(configs)}")
    bodies = []
    for i, cfg in enumerate(configs):
        if not isinstance(cfg, dict):
            raise ValueError(f"Body {i + 1} must be a mapping, got {type(cfg).__name__}")
        try:
            bodies.append(
                Body(
                    mass=cfg["mass"],
                    position=cfg["position"],
                    velocity=cfg["velocity"],
                    name=str(cfg.get("name") or f"body{i + 1}"),
                )
            )
        except KeyError as e:
            raise ValueError(f"Body {i + 1} is missing field {e}") from e
        except TypeError as e:
            raise ValueError(f"Body {i + 1}: {e}") from e
    return ThreeBodyState(bodies)
