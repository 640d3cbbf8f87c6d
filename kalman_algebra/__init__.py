"""
kalman_algebra: dense matrix algebra and a generic Kalman filter

This package contains:
- A dense real matrix engine (linalg)
- The capability interface and Kalman filter built on it (filters)
- Linear Gaussian simulation for exercising the filter (ssm)
- Metrics and plotting helpers (utils)
"""
import logging

from .errors import (
    ConstructionSizeMismatch,
    DimensionMismatch,
    IncompatibleMultiplication,
    IndexOutOfRange,
    MatrixError,
    NotSquare,
)
from .linalg import Index, Matrix, MatrixBuilder
from .filters import (
    EstimatorScalar,
    KalmanFilter,
    identity_minus,
    invert,
    kalman_filter,
    transpose,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    'Matrix',
    'MatrixBuilder',
    'Index',
    'KalmanFilter',
    'kalman_filter',
    'EstimatorScalar',
    'transpose',
    'invert',
    'identity_minus',
    'MatrixError',
    'ConstructionSizeMismatch',
    'IndexOutOfRange',
    'NotSquare',
    'DimensionMismatch',
    'IncompatibleMultiplication',
]
