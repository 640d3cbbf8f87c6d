"""
Utility Functions.

This module contains utility functions for:
- Metrics computation
- Visualization (organized in visualization/ subfolder)
"""
from .metrics import (
    compute_mse,
    compute_nees,
    compute_nis,
    compute_rmse,
    stack_estimates,
)
from .visualization import plot_kalman_filter

__all__ = [
    # metrics
    'stack_estimates',
    'compute_mse',
    'compute_rmse',
    'compute_nees',
    'compute_nis',
    # visualization
    'plot_kalman_filter',
]
