"""
PySimplegraph - Simple Graph Analysis Library

A Python library for building undirected, unweighted graphs without loops or
multiple edges, querying their structure and computing greedy approximations
of dominating, connected dominating and independent vertex sets.

Main Classes:
    pysimplegraph: Main graph class (facade)
    pyvertex: Vertex representation in the graph
    IndexView: Read-only sorted view of vertex indices

Example:
    >>> from simplegraph import pysimplegraph
    >>> graph = pysimplegraph().complete(0, 5)
    >>> graph.is_complete()
    True
    >>> graph.compute_minimum_dominating_set()
    IndexView([0])
"""

__version__ = "0.1.0"

from simplegraph.classes.vertex import pyvertex
from simplegraph.classes.index_view import IndexView
from simplegraph.core.exceptions import (
    GraphError,
    VertexIndexError,
    NegativeIndexError,
    NoSuchVertexError,
    UnsupportedMutationError,
    GraphFormatError,
)
from simplegraph.core.simplegraph import pysimplegraph
from simplegraph.formats.import_graph import (
    read_graph_from_file,
    read_graph_from_lines,
    read_graph_from_adjacency_matrix,
)
from simplegraph.formats.export_graph import (
    format_graph,
    export_graph_to_file,
    export_adjacency_matrix,
    summarize_graph,
)

__all__ = [
    'pysimplegraph',
    'pyvertex',
    'IndexView',
    'GraphError',
    'VertexIndexError',
    'NegativeIndexError',
    'NoSuchVertexError',
    'UnsupportedMutationError',
    'GraphFormatError',
    'read_graph_from_file',
    'read_graph_from_lines',
    'read_graph_from_adjacency_matrix',
    'format_graph',
    'export_graph_to_file',
    'export_adjacency_matrix',
    'summarize_graph',
]
