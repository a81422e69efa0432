"""
IRT (Item Response Theory) module.

This module provides:
- The 3PL probability of a correct response
- Newton-Raphson maximum likelihood ability estimation
- Conversions between difficulty labels, ability and the 0-1 scale
- Adaptive-session helpers and response sampling
"""

from ability_service.irt.adaptive import (
    estimate_session_ability,
    next_item_difficulty,
)
from ability_service.irt.estimation import (
    AbilityEstimationResult,
    ConvergenceStatus,
    derivatives,
    estimate_ability,
    estimate_ability_detailed,
)
from ability_service.irt.response_models import probability, probability_batch
from ability_service.irt.sampling import sample_responses
from ability_service.irt.scales import (
    denormalize_ability,
    difficulty_label_to_irt,
    normalize_ability,
    target_difficulty,
)

__all__ = [
    "AbilityEstimationResult",
    "ConvergenceStatus",
    "denormalize_ability",
    "derivatives",
    "difficulty_label_to_irt",
    "estimate_ability",
    "estimate_ability_detailed",
    "estimate_session_ability",
    "next_item_difficulty",
    "normalize_ability",
    "probability",
    "probability_batch",
    "sample_responses",
    "target_difficulty",
]
