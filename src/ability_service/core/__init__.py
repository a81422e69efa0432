"""
Core shared types and utilities for the ability service.

This module provides foundational components used across multiple submodules:
the response value types consumed by the IRT estimator, the fixed constants
of the ability scale and the domain error raised for invalid inputs.
"""

from ability_service.core.data_models import DifficultyLabel, ItemResponse
from ability_service.core.errors import InvalidParameterError
from ability_service.core.utils import get_rng

__all__ = [
    "DifficultyLabel",
    "InvalidParameterError",
    "ItemResponse",
    "get_rng",
]
