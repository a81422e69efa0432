"""
Response sampling under the 3PL model.

Draws right/wrong outcomes for a candidate of known ability, for
simulation studies of the ability estimator.
"""

from collections.abc import Sequence

import numpy as np
from numpy.random import Generator

from ability_service.core.constants import (
    DEFAULT_DISCRIMINATION,
    DEFAULT_GUESSING,
)
from ability_service.core.data_models import ItemResponse
from ability_service.core.utils import get_rng
from ability_service.irt.response_models import probability


def sample_responses(
    ability: float,
    difficulties: Sequence[float],
    discrimination: float = DEFAULT_DISCRIMINATION,
    guessing: float = DEFAULT_GUESSING,
    rng: Generator | None = None,
) -> list[ItemResponse]:
    """
    Sample one response per item for a candidate of the given ability.

    Args:
        ability: Candidate's true ability.
        difficulties: Difficulty (b) of each administered item.
        discrimination: Discrimination (a) shared by all items.
        guessing: Guessing parameter (c) shared by all items.
        rng: Random number generator.

    Returns:
        Responses in item order.
    """
    if rng is None:
        rng = get_rng()

    b = np.asarray(difficulties, dtype=np.float64)
    p_correct = np.array(
        [probability(ability, float(bj), discrimination, guessing) for bj in b]
    )
    u = rng.random(len(b))

    return [
        ItemResponse(
            is_correct=bool(u[j] < p_correct[j]),
            difficulty=float(b[j]),
            discrimination=discrimination,
            guessing=guessing,
        )
        for j in range(len(b))
    ]
