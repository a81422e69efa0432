"""
3-Parameter Logistic (3PL) response model.

The 3PL model gives the probability of a correct answer:
    P(correct | theta) = c + (1 - c) / (1 + exp(-a * (theta - b)))

Where:
    - theta: candidate ability
    - a: discrimination parameter
    - b: difficulty parameter
    - c: guessing (pseudo-chance) parameter

The guessing parameter is the probability that even very low ability
candidates answer correctly (through guessing).
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ability_service.core.constants import (
    DEFAULT_DISCRIMINATION,
    DEFAULT_GUESSING,
)


def probability(
    ability: float,
    difficulty: float,
    discrimination: float = DEFAULT_DISCRIMINATION,
    guessing: float = DEFAULT_GUESSING,
) -> float:
    """
    Probability of a correct response under the 3PL model.

    Total over all real inputs: an overflowing exponent yields the
    guessing floor instead of raising.

    Args:
        ability: Candidate's latent ability (theta).
        difficulty: Item difficulty (b).
        discrimination: Item discrimination (a).
        guessing: Lower asymptote (c).

    Returns:
        Probability in [guessing, 1].
    """
    exponent = np.float64(-discrimination * (ability - difficulty))
    with np.errstate(over="ignore"):
        denominator = 1.0 + np.exp(exponent)
    return float(guessing + (1.0 - guessing) / denominator)


def probability_batch(
    abilities: ArrayLike,
    difficulty: float,
    discrimination: float = DEFAULT_DISCRIMINATION,
    guessing: float = DEFAULT_GUESSING,
) -> NDArray[np.float64]:
    """
    Vectorized 3PL probability for many abilities and one item.

    Args:
        abilities: Ability values, any shape.
        difficulty: Item difficulty (b).
        discrimination: Item discrimination (a).
        guessing: Lower asymptote (c).

    Returns:
        Array with the shape of abilities holding P(correct).
    """
    theta = np.asarray(abilities, dtype=np.float64)
    exponent = -discrimination * (theta - difficulty)
    with np.errstate(over="ignore"):
        result: NDArray[np.float64] = guessing + (1.0 - guessing) / (
            1.0 + np.exp(exponent)
        )
    return result
