"""
Analytical derivatives of the 3PL response-pattern log-likelihood.

For one item with P = P(θ) and Q = 1 - P:
    P'  = a * (P - c) * (1 - P) / (1 - c)
    P'' = a * P' * (1 - 2P + c) / (1 - c)

Log-likelihood contributions:
    correct:   log P   -> L'  += P'/P,  L'' += (P''·P - P'²) / P²
    incorrect: log Q   -> L'  -= P'/Q,  L'' -= (P''·Q + P'²) / Q²

Test (Fisher) information, the expected value of -L'':
    I(θ) = Σ P'² / (P·Q)

log Q is concave in θ for every item, but log P is convex below the item
difficulty when c > 0, so L'' alone is not always negative.

Contributions are accumulated serially in response order, so the sums are
bit-for-bit reproducible for identical inputs.

Precondition: every guessing parameter is strictly below 1. Division by a
vanishing P or Q follows IEEE semantics (inf/nan) rather than raising.
"""

from collections.abc import Sequence

import numpy as np
from numba import njit  # type: ignore
from numpy.typing import NDArray

from ability_service.core.data_models import ItemResponse


@njit(error_model="numpy")  # type: ignore
def _item_probability(
    theta: float, difficulty: float, discrimination: float, guessing: float
) -> float:
    """numba compatible 3PL probability of a correct answer."""
    exponent = -discrimination * (theta - difficulty)
    return guessing + (1.0 - guessing) / (1.0 + np.exp(exponent))


@njit(error_model="numpy")  # type: ignore
def compute_log_likelihood_derivatives(
    theta: float,
    is_correct: NDArray[np.bool_],
    difficulties: NDArray[np.float64],
    discriminations: NDArray[np.float64],
    guessing: NDArray[np.float64],
) -> tuple[float, float]:
    """
    First and second derivative of the log-likelihood at theta.

    Args:
        theta: Ability at which to evaluate.
        is_correct: Observed correctness per response, shape (n_responses,).
        difficulties: Item difficulties (b), shape (n_responses,).
        discriminations: Item discriminations (a), shape (n_responses,).
        guessing: Item guessing parameters (c), shape (n_responses,).

    Returns:
        Tuple (L'(theta), L''(theta)).
    """
    first = 0.0
    second = 0.0

    for i in range(len(is_correct)):
        a = discriminations[i]
        c = guessing[i]
        p = _item_probability(theta, difficulties[i], a, c)
        q = 1.0 - p

        dp = a * (p - c) * (1.0 - p) / (1.0 - c)
        d2p = a * dp * (1.0 - 2.0 * p + c) / (1.0 - c)

        if is_correct[i]:
            first += dp / p
            second += (d2p * p - dp * dp) / (p * p)
        else:
            first -= dp / q
            second -= (d2p * q + dp * dp) / (q * q)

    return first, second


@njit(error_model="numpy")  # type: ignore
def compute_log_likelihood(
    theta: float,
    is_correct: NDArray[np.bool_],
    difficulties: NDArray[np.float64],
    discriminations: NDArray[np.float64],
    guessing: NDArray[np.float64],
) -> float:
    """
    Log-likelihood of a response pattern at theta.

    Args:
        theta: Ability at which to evaluate.
        is_correct: Observed correctness per response, shape (n_responses,).
        difficulties: Item difficulties (b), shape (n_responses,).
        discriminations: Item discriminations (a), shape (n_responses,).
        guessing: Item guessing parameters (c), shape (n_responses,).

    Returns:
        Σ log P for correct responses plus Σ log Q for incorrect ones.
    """
    total = 0.0
    for i in range(len(is_correct)):
        p = _item_probability(
            theta, difficulties[i], discriminations[i], guessing[i]
        )
        if is_correct[i]:
            total += np.log(p)
        else:
            total += np.log(1.0 - p)
    return total


@njit(error_model="numpy")  # type: ignore
def compute_test_information(
    theta: float,
    difficulties: NDArray[np.float64],
    discriminations: NDArray[np.float64],
    guessing: NDArray[np.float64],
) -> float:
    """
    Fisher information of the administered items at theta.

    Args:
        theta: Ability at which to evaluate.
        difficulties: Item difficulties (b), shape (n_responses,).
        discriminations: Item discriminations (a), shape (n_responses,).
        guessing: Item guessing parameters (c), shape (n_responses,).

    Returns:
        Σ P'² / (P·Q), independent of the observed answers.
    """
    total = 0.0
    for i in range(len(difficulties)):
        a = discriminations[i]
        c = guessing[i]
        p = _item_probability(theta, difficulties[i], a, c)
        dp = a * (p - c) * (1.0 - p) / (1.0 - c)
        total += dp * dp / (p * (1.0 - p))
    return total


class ResponseArrays:
    """
    Column-oriented view of a response list for the numba kernels.

    Attributes:
        is_correct: Observed correctness, shape (n_responses,).
        difficulties: Item difficulties, shape (n_responses,).
        discriminations: Item discriminations, shape (n_responses,).
        guessing: Item guessing parameters, shape (n_responses,).
    """

    def __init__(self, responses: Sequence[ItemResponse]) -> None:
        self.is_correct = np.array(
            [r.is_correct for r in responses], dtype=np.bool_
        )
        self.difficulties = np.array(
            [r.difficulty for r in responses], dtype=np.float64
        )
        self.discriminations = np.array(
            [r.discrimination for r in responses], dtype=np.float64
        )
        self.guessing = np.array(
            [r.guessing for r in responses], dtype=np.float64
        )

    def __len__(self) -> int:
        return len(self.is_correct)

    def derivatives(self, theta: float) -> tuple[float, float]:
        first, second = compute_log_likelihood_derivatives(
            float(theta),
            self.is_correct,
            self.difficulties,
            self.discriminations,
            self.guessing,
        )
        return float(first), float(second)

    def information(self, theta: float) -> float:
        return float(
            compute_test_information(
                float(theta),
                self.difficulties,
                self.discriminations,
                self.guessing,
            )
        )

    def log_likelihood(self, theta: float) -> float:
        return float(
            compute_log_likelihood(
                float(theta),
                self.is_correct,
                self.difficulties,
                self.discriminations,
                self.guessing,
            )
        )


def derivatives(
    ability: float, responses: Sequence[ItemResponse]
) -> tuple[float, float]:
    """
    Summed first and second log-likelihood derivatives over responses.

    Args:
        ability: Ability (theta) at which to evaluate.
        responses: Observed responses with their item parameters.

    Returns:
        Tuple (first_derivative, second_derivative). Both are 0.0 for an
        empty response list.
    """
    return ResponseArrays(responses).derivatives(ability)
