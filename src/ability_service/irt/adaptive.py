"""
Ability tracking for adaptive exam sessions.

A session's ability is reported on the 0-1 scale and drives the difficulty
label of the next item served.
"""

from collections.abc import Sequence

from ability_service.core.constants import NEUTRAL_NORMALIZED_ABILITY
from ability_service.core.data_models import DifficultyLabel, ItemResponse
from ability_service.irt.estimation.estimator import estimate_ability
from ability_service.irt.scales import normalize_ability, target_difficulty


def estimate_session_ability(responses: Sequence[ItemResponse]) -> float:
    """
    Normalized ability of an adaptive session.

    Args:
        responses: Answered items of the session, in the order served.

    Returns:
        Ability in [0, 1]; 0.5 when nothing has been answered yet.
    """
    if len(responses) == 0:
        return NEUTRAL_NORMALIZED_ABILITY

    theta = estimate_ability(responses, 0.0)
    return max(0.0, min(1.0, normalize_ability(theta)))


def next_item_difficulty(responses: Sequence[ItemResponse]) -> DifficultyLabel:
    """Difficulty label for the next item given the session so far."""
    return target_difficulty(estimate_session_ability(responses))
