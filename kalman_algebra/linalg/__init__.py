"""Dense matrix algebra engine."""
from .matrix import (
    DEFAULT_ATOL,
    DEFAULT_RTOL,
    SINGULARITY_TOLERANCE,
    Index,
    Matrix,
    MatrixBuilder,
)
from .formatting import describe

__all__ = [
    'Index',
    'Matrix',
    'MatrixBuilder',
    'describe',
    'SINGULARITY_TOLERANCE',
    'DEFAULT_RTOL',
    'DEFAULT_ATOL',
]
