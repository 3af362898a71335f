from .crowding_archive import CrowdingArchive

__all__ = ["CrowdingArchive"]
