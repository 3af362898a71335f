from .config import MOCellConfig, MOCellConfigData
from .mocell import MOCell
from .mocell_state import MOCellState, build_mocell_result
from .neighborhood import Neighborhood

__all__ = [
    "MOCell",
    "MOCellConfig",
    "MOCellConfigData",
    "MOCellState",
    "build_mocell_result",
    "Neighborhood",
]
