"""
Plot building for Word-Verse.
"""

from .points import PointSet, build_point_sets, build_tooltip, wrap_definition
from .scatter import ScatterPlotBuilder

__all__ = ["PointSet", "build_point_sets", "build_tooltip", "wrap_definition", "ScatterPlotBuilder"]
