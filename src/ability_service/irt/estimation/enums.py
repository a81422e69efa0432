from enum import StrEnum


class ConvergenceStatus(StrEnum):
    CONVERGED = "converged"
    LOWER_BOUND = "lower_bound"
    UPPER_BOUND = "upper_bound"
    FLAT_LIKELIHOOD = "flat_likelihood"
    MAX_ITERATIONS = "max_iterations"
    NO_DATA = "no_data"
