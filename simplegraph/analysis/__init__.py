"""
Graph analysis modules for traversing graphs and detecting their structure.

This module contains classes for restricted traversals, structural queries
and greedy vertex set construction.
"""

__all__ = ['traversal', 'detection', 'approximation']
