"""Plotting helpers."""
from .filters import plot_kalman_filter

__all__ = [
    'plot_kalman_filter',
]
