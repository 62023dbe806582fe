"""
Build graphs from external definitions.

The text format has one entry per line: either a single vertex index `v`
(make sure vertex v exists) or a pair `v;u` (make sure both vertices exist
and connect them). Blank lines and lines starting with '#' are skipped.
"""

import logging
from typing import Iterable, Optional, Sequence

import numpy as np

from ..core.constants import COMMENT_PREFIX, FIELD_DELIMITER
from ..core.exceptions import GraphFormatError
from ..core.simplegraph import pysimplegraph

logger = logging.getLogger(__name__)


def read_graph_from_lines(aLine: Iterable[str],
                          pGraph: Optional[pysimplegraph] = None,
                          delimiter: str = FIELD_DELIMITER,
                          sSource: Optional[str] = None) -> pysimplegraph:
    """
    Add the vertices and edges described by text lines to a graph.

    Args:
        aLine: Lines of the definition
        pGraph: Graph to fill; a new empty graph when omitted
        delimiter: Separator between the two indices of an edge line
        sSource: Name of the input, used in error messages

    Returns:
        The filled graph

    Raises:
        GraphFormatError: If a line has more than two fields or a field is not an integer
        NegativeIndexError: If a line names a negative index; processing stops there
    """
    if pGraph is None:
        pGraph = pysimplegraph()

    nEdge = 0
    for iLine, sLine in enumerate(aLine, start=1):
        sLine = sLine.strip()
        if not sLine or sLine.startswith(COMMENT_PREFIX):
            continue

        aField = [sField.strip() for sField in sLine.split(delimiter)]
        if len(aField) > 2:
            raise GraphFormatError(f"expected at most 2 fields, found {len(aField)}",
                                   sSource, iLine)
        try:
            aIndex = [int(sField) for sField in aField]
        except ValueError as e:
            raise GraphFormatError(f"invalid vertex index in {sLine!r}", sSource, iLine) from e

        for index in aIndex:
            pGraph.add_vertex(index)
        if len(aIndex) == 2 and pGraph.connect(aIndex[0], aIndex[1]):
            nEdge += 1

    logger.debug(f"Read {len(pGraph)} vertices and {nEdge} new edges from {sSource or 'lines'}")
    return pGraph


def read_graph_from_file(sFilename: str,
                         pGraph: Optional[pysimplegraph] = None,
                         delimiter: str = FIELD_DELIMITER) -> pysimplegraph:
    """
    Build a graph from a text definition file.

    Args:
        sFilename: Path of the definition file
        pGraph: Graph to fill; a new empty graph when omitted
        delimiter: Separator between the two indices of an edge line

    Returns:
        The filled graph

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be read
        GraphFormatError: If a line cannot be parsed
        NegativeIndexError: If a line names a negative index
    """
    with open(sFilename, "r", encoding="utf-8") as pFile:
        pGraph = read_graph_from_lines(pFile, pGraph, delimiter, sSource=sFilename)

    logger.info(f"Loaded graph with {len(pGraph)} vertices from {sFilename}")
    return pGraph


def read_graph_from_adjacency_matrix(aMatrix,
                                     aIndex: Optional[Sequence[int]] = None) -> pysimplegraph:
    """
    Build a graph from a symmetric 0/1 adjacency matrix.

    Args:
        aMatrix: Square matrix (any array-like); non-zero entries are edges
        aIndex: Vertex index of each row; 0..n-1 when omitted

    Returns:
        The new graph

    Raises:
        GraphFormatError: If the matrix is not square or not symmetric,
            or if aIndex does not match the matrix size
        NegativeIndexError: If aIndex holds a negative index
    """
    aAdjacency = np.asarray(aMatrix) != 0
    if aAdjacency.ndim != 2 or aAdjacency.shape[0] != aAdjacency.shape[1]:
        raise GraphFormatError(f"adjacency matrix must be square, got shape {aAdjacency.shape}")

    # Self-loops are not representable, the diagonal carries no information
    np.fill_diagonal(aAdjacency, False)
    if not np.array_equal(aAdjacency, aAdjacency.T):
        raise GraphFormatError("adjacency matrix must be symmetric")

    nVertex = aAdjacency.shape[0]
    if aIndex is None:
        aIndex = list(range(nVertex))
    elif len(aIndex) != nVertex or len(set(aIndex)) != nVertex:
        raise GraphFormatError(f"expected {nVertex} distinct vertex indices, got {list(aIndex)}")

    pGraph = pysimplegraph()
    pGraph.add_vertices(aIndex)
    for i, j in zip(*np.nonzero(np.triu(aAdjacency))):
        pGraph.connect(aIndex[int(i)], aIndex[int(j)])

    return pGraph
