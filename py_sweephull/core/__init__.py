"""
Core triangulation functionality.
"""

from .delaunator import Delaunator, triangulate
from .triangulation import (
    EMPTY,
    Triangulation,
    next_halfedge,
    prev_halfedge,
    triangle_of_edge,
    edges_of_triangle,
)
from .predicates import orient2d

__all__ = ['Delaunator', 'triangulate', 'Triangulation', 'EMPTY',
           'next_halfedge', 'prev_halfedge', 'triangle_of_edge', 'edges_of_triangle',
           'orient2d']
