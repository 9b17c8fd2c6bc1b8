"""
py_sweephull: Delaunay triangulation and convex hull of planar point sets.
"""

__version__ = "0.1.0"

from .core import Delaunator, Triangulation, triangulate

__all__ = ['Delaunator', 'Triangulation', 'triangulate', '__version__']
