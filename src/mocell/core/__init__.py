from .candidate import Candidate, check_permutation, stack_objectives, stack_variables
from .crowding import (
    crowding_distance_assignment,
    crowding_distances,
    crowding_sort_key,
    sort_by_rank_and_crowding,
)
from .dominance import (
    DominanceComparator,
    compare_dominance,
    compare_objectives,
    dominates,
    objectives_equal,
)
from .ranking import Ranking

__all__ = [
    "Candidate",
    "check_permutation",
    "stack_objectives",
    "stack_variables",
    "crowding_distance_assignment",
    "crowding_distances",
    "crowding_sort_key",
    "sort_by_rank_and_crowding",
    "DominanceComparator",
    "compare_dominance",
    "compare_objectives",
    "dominates",
    "objectives_equal",
    "Ranking",
]
