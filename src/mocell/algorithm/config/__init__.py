"""Algorithm configuration module.

Examples:
    from mocell.algorithm.config import MOCellConfig

    # Fluent builder
    cfg = MOCellConfig().pop_size(100).archive_size(100).max_evaluations(25000)...fixed()

    # Quick defaults
    cfg = MOCellConfig.default(pop_size=100, n_var=30)

    # Flat parameter mapping
    cfg = MOCellConfig.from_dict({"populationSize": 100, "archiveSize": 100, ...})
"""

from .mocell import MOCellConfig, MOCellConfigData

__all__ = ["MOCellConfig", "MOCellConfigData"]
