"""
Constants shared across the simplegraph package.
"""

# Largest vertex index a graph accepts when generating vertices itself
MAX_VERTEX_INDEX = 2**31 - 1

# Text format used by the bulk loader and the file exporter
FIELD_DELIMITER = ";"
COMMENT_PREFIX = "#"
