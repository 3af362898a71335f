from .permutation import (
    PMXCrossover,
    SwapMutation,
    pmx_children,
    pmx_crossover,
    random_permutation_population,
    swap_mutation,
)
from .registry import available_operators, build_operator, check_encoding
from .selection import BinaryTournament, RandomSelection

__all__ = [
    "PMXCrossover",
    "SwapMutation",
    "pmx_children",
    "pmx_crossover",
    "random_permutation_population",
    "swap_mutation",
    "available_operators",
    "build_operator",
    "check_encoding",
    "BinaryTournament",
    "RandomSelection",
]
