"""
Ability estimation module.

This module provides maximum likelihood estimation of a candidate's latent
ability from right/wrong responses under the 3PL model.

Key components:
- EstimationConfig: Configuration for estimation
- derivatives: Log-likelihood derivatives for a response pattern
- estimate_ability: Newton-Raphson ability estimate
- estimate_ability_detailed: Same estimate with termination diagnostics
"""

from ability_service.irt.estimation.config import (
    AbilityBounds,
    EstimationConfig,
    NewtonRaphsonConfig,
    default_config,
)
from ability_service.irt.estimation.data_models import AbilityEstimationResult
from ability_service.irt.estimation.derivatives import derivatives
from ability_service.irt.estimation.enums import ConvergenceStatus
from ability_service.irt.estimation.estimator import (
    estimate_ability,
    estimate_ability_detailed,
)

__all__ = [
    "AbilityBounds",
    "AbilityEstimationResult",
    "ConvergenceStatus",
    "EstimationConfig",
    "NewtonRaphsonConfig",
    "default_config",
    "derivatives",
    "estimate_ability",
    "estimate_ability_detailed",
]
