from .containers import TopoSortArray, TopoSortDict, TopoSortList, TopoSortMap
from .merge import CapacityError, merge_fixed, merge_mapping, merge_sequence
from .settings import Settings
from .toposort import ConstraintGraph, CycleError


__all__ = (
    "ConstraintGraph", "CycleError",
    "CapacityError", "merge_mapping", "merge_sequence", "merge_fixed",
    "TopoSortDict", "TopoSortMap", "TopoSortList", "TopoSortArray",
    "Settings",
)
