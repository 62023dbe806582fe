"""
Reading graphs from and writing graphs to external representations.
"""

__all__ = ['import_graph', 'export_graph']
