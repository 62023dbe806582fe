"""
Core graph data structures and management.

This module contains the fundamental graph representation, the error
taxonomy and the public graph facade.
"""

__all__ = ['graph', 'simplegraph', 'exceptions', 'constants']
