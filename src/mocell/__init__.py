"""Cellular multi-objective evolutionary optimization over permutations."""

from .algorithm import MOCell, MOCellConfig, MOCellConfigData, MOCellState, Neighborhood
from .archive import CrowdingArchive
from .core import (
    Candidate,
    DominanceComparator,
    Ranking,
    compare_dominance,
    crowding_distance_assignment,
)
from .foundation import (
    ConfigurationError,
    ContractViolationError,
    Encoding,
    MissingConfigError,
    MOCellError,
    UnsupportedEncodingError,
    configure_mocell_logging,
)
from .operators import BinaryTournament, PMXCrossover, SwapMutation, pmx_children
from .problem import FunctionalProblem, TSPProblem

__version__ = "0.1.0"

__all__ = [
    "MOCell",
    "MOCellConfig",
    "MOCellConfigData",
    "MOCellState",
    "Neighborhood",
    "CrowdingArchive",
    "Candidate",
    "DominanceComparator",
    "Ranking",
    "compare_dominance",
    "crowding_distance_assignment",
    "ConfigurationError",
    "ContractViolationError",
    "Encoding",
    "MissingConfigError",
    "MOCellError",
    "UnsupportedEncodingError",
    "configure_mocell_logging",
    "BinaryTournament",
    "PMXCrossover",
    "SwapMutation",
    "pmx_children",
    "FunctionalProblem",
    "TSPProblem",
]
