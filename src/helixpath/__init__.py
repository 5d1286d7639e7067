"""
helixpath - Helical channel toolpath generator for rotary-axis mills.

Plans rough and finishing passes for cutting a helical channel into
cylindrical stock held on a rotary A axis, and renders them as G-code.
"""

__version__ = "0.1.0"
__author__ = "helixpath Contributors"

from helixpath.planning import CuttingParameters, Shape, Waypoint, plan_toolpath

__all__ = [
    "__version__",
    "Shape",
    "CuttingParameters",
    "Waypoint",
    "plan_toolpath",
]
