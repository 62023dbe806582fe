"""
Core data classes for graph representation.

This module contains the fundamental data structures used throughout
the simplegraph library.
"""

from .vertex import pyvertex
from .index_view import IndexView

__all__ = [
    'pyvertex',
    'IndexView',
]
