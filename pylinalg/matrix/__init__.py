"""
Matrix module.

Dense matrices stored as rows of Vectors, with value semantics except for
the explicit in-place row swap.

Public API:
    Matrix                               - value type
    make_matrix, zeros, identity         - generator-function builders
    row_matrix, column_matrix, copy      - conversions
    add, subtract, multiply, transpose   - algebra
    bracket                              - Lie bracket AB - BA
    determinant, dimensions              - queries
    join, append_column, append_row     - concatenation
    set_dims                             - embed / truncate
    swap_rows, swap_cols                 - reordering copies
    sort_rows_in_place                   - in-place row sort
    equals, is_close, format_matrix      - comparison and rendering
"""

from pylinalg.matrix._matrix import Matrix
from pylinalg.matrix._determinant import determinant
from pylinalg.matrix.construction import (
    make_matrix,
    zeros,
    identity,
    row_matrix,
    column_matrix,
    copy,
)
from pylinalg.matrix.operations import (
    dimensions,
    add,
    subtract,
    transpose,
    multiply,
    bracket,
    equals,
    is_close,
    format_matrix,
)
from pylinalg.matrix.structure import (
    join,
    append_column,
    append_row,
    set_dims,
    swap_rows,
    swap_cols,
    sort_rows_in_place,
)

__all__ = [
    "Matrix",
    "make_matrix",
    "zeros",
    "identity",
    "row_matrix",
    "column_matrix",
    "copy",
    "dimensions",
    "add",
    "subtract",
    "transpose",
    "multiply",
    "bracket",
    "determinant",
    "equals",
    "is_close",
    "format_matrix",
    "join",
    "append_column",
    "append_row",
    "set_dims",
    "swap_rows",
    "swap_cols",
    "sort_rows_in_place",
]
