"""Estimator implementations and the capabilities they require."""
from .kf import KalmanFilter, kalman_filter
from .scalar import EstimatorScalar, identity_minus, invert, transpose

__all__ = [
    # Estimator
    'KalmanFilter',
    'kalman_filter',
    # Capability interface
    'EstimatorScalar',
    'transpose',
    'invert',
    'identity_minus',
]
