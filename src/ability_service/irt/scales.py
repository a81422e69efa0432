"""
Conversions between human-facing scales and the IRT ability scale.

- Difficulty labels (easy/medium/hard) map onto item difficulty (b).
- Ability (theta) maps onto a 0-1 scale through the standard logistic
  function, and back through its inverse (the logit).
"""

from scipy.special import expit, logit

from ability_service.core.constants import (
    EASY_DIFFICULTY,
    HARD_DIFFICULTY,
    HARD_TARGET_THRESHOLD,
    MEDIUM_DIFFICULTY,
    MEDIUM_TARGET_THRESHOLD,
)
from ability_service.core.data_models import DifficultyLabel
from ability_service.core.errors import InvalidParameterError

_LABEL_TO_DIFFICULTY: dict[str, float] = {
    DifficultyLabel.EASY: EASY_DIFFICULTY,
    DifficultyLabel.MEDIUM: MEDIUM_DIFFICULTY,
    DifficultyLabel.HARD: HARD_DIFFICULTY,
}


def difficulty_label_to_irt(label: str) -> float:
    """Map a difficulty label to IRT difficulty; unknown labels are medium."""
    return _LABEL_TO_DIFFICULTY.get(label, MEDIUM_DIFFICULTY)


def normalize_ability(theta: float) -> float:
    """
    Map ability onto (0, 1) with the standard logistic 1 / (1 + exp(-theta)).
    """
    return float(expit(theta))


def denormalize_ability(normalized: float) -> float:
    """
    Inverse of normalize_ability: ln(p / (1 - p)).

    Args:
        normalized: Ability on the 0-1 scale, strictly between 0 and 1.

    Returns:
        Ability on the logistic scale.

    Raises:
        InvalidParameterError: If normalized is not in the open interval
            (0, 1), where the logit diverges.
    """
    if not 0.0 < normalized < 1.0:
        raise InvalidParameterError(
            f"normalized ability must be in (0, 1), got {normalized}"
        )
    return float(logit(normalized))


def target_difficulty(normalized_ability: float) -> DifficultyLabel:
    """
    Pick the difficulty of the next adaptive item from normalized ability.
    """
    if normalized_ability >= HARD_TARGET_THRESHOLD:
        return DifficultyLabel.HARD
    if normalized_ability >= MEDIUM_TARGET_THRESHOLD:
        return DifficultyLabel.MEDIUM
    return DifficultyLabel.EASY
