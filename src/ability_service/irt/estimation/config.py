"""
Configuration dataclasses for Newton-Raphson ability estimation.

The defaults reproduce the fixed behavior of the estimator:
at most 50 iterations, a 0.001 step tolerance, a 1e-10 floor on the
magnitude of the second derivative and a hard [-3, 3] ability range.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from importlib import metadata
from pathlib import Path

import toml

from ability_service.core.constants import ABILITY_MAX, ABILITY_MIN
from ability_service.core.paths import (
    ProjectRootNotFound,
    get_project_root_dir,
)

# Default convergence settings
DEFAULT_MAX_ITERATIONS = 50
DEFAULT_STEP_TOLERANCE = 0.001
DEFAULT_MIN_CURVATURE = 1e-10


DISTRIBUTION_NAME = "ability-service"


@lru_cache(maxsize=1)
def _get_project_version() -> str:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        # Running from a source checkout that was never installed
        return _read_pyproject_version(get_project_root_dir())


def _read_pyproject_version(root_dir: Path) -> str:
    with open(root_dir / "pyproject.toml") as f:
        data = toml.load(f)

    project = data.get("project", {})
    if project.get("name") != DISTRIBUTION_NAME:
        raise ProjectRootNotFound(
            f"{root_dir / 'pyproject.toml'} does not describe "
            f"{DISTRIBUTION_NAME}"
        )

    version = project.get("version")

    if not version:
        raise ValueError("Version not found in pyproject.toml")

    assert isinstance(version, str)
    return version


@dataclass(frozen=True)
class NewtonRaphsonConfig:
    """
    Configuration for the Newton-Raphson ability search.

    Attributes:
        max_iterations: Maximum number of Newton steps.
        step_tolerance: Iteration stops once |theta_new - theta| falls
            below this value.
        min_curvature: Iteration stops, keeping the current theta, when
            |L''(theta)| falls below this value.
    """

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    step_tolerance: float = DEFAULT_STEP_TOLERANCE
    min_curvature: float = DEFAULT_MIN_CURVATURE


@dataclass(frozen=True)
class AbilityBounds:
    """
    Hard limits of the ability scale.

    A Newton step landing outside (lower, upper) is clamped to the
    violated bound and ends the search.
    """

    lower: float = ABILITY_MIN
    upper: float = ABILITY_MAX


@dataclass(frozen=True)
class EstimationConfig:
    """
    Master configuration for ability estimation.

    Attributes:
        newton: Newton-Raphson convergence settings.
        bounds: Ability scale limits.
        model_version: Version string for reproducibility tracking.
    """

    newton: NewtonRaphsonConfig = NewtonRaphsonConfig()
    bounds: AbilityBounds = AbilityBounds()
    model_version: str = field(default_factory=_get_project_version)


@lru_cache(maxsize=1)
def default_config() -> EstimationConfig:
    """Shared default estimation configuration (immutable)."""
    return EstimationConfig()
