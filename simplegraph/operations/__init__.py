"""
Graph operation modules for modifying graphs as a whole.
"""

__all__ = ['completion']
