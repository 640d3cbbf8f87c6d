"""
Metrics for evaluating filter performance.
"""
import numpy as np


def stack_estimates(filters):
    """
    Collect matrix-valued filter states into numpy arrays.

    Parameters
    ----------
    filters : sequence of KalmanFilter
        Filters whose state is a Matrix column vector [n_x, 1] and whose
        covariance is a Matrix [n_x, n_x]

    Returns
    -------
    m_filt : ndarray [T, n_x]
        State estimates
    P_filt : ndarray [T, n_x, n_x]
        Error covariances
    """
    if not filters:
        return np.zeros((0, 0)), np.zeros((0, 0, 0))
    m_filt = np.stack([kf.state_estimate.to_numpy().reshape(-1) for kf in filters])
    P_filt = np.stack([kf.error_covariance.to_numpy() for kf in filters])
    return m_filt, P_filt


def compute_mse(estimated, true):
    """
    Compute Mean Squared Error.

    Parameters
    ----------
    estimated : ndarray
        Estimated values
    true : ndarray
        True values

    Returns
    -------
    float
        Mean squared error
    """
    return np.mean((np.asarray(estimated) - np.asarray(true))**2)


def compute_rmse(estimated, true):
    """Root Mean Squared Error."""
    return np.sqrt(compute_mse(estimated, true))


def compute_nees(m_filt, P_filt, xs, regularize=1e-8):
    """
    Compute Normalized Estimation Error Squared (NEES).

    NEES = (x - m)' * P^{-1} * (x - m)

    For a consistent filter, NEES should follow chi-squared(n_x) distribution.

    Parameters
    ----------
    m_filt : ndarray [T, n_x]
        Filtered means
    P_filt : ndarray [T, n_x, n_x]
        Filtered covariances
    xs : ndarray [T, n_x]
        True states
    regularize : float
        Small value added to diagonal before solving

    Returns
    -------
    ndarray [T]
        NEES values at each time step
    """
    T, n_x = m_filt.shape
    nees = np.zeros(T)

    for t in range(T):
        error = xs[t] - m_filt[t]
        P_reg = P_filt[t] + regularize * np.eye(n_x)
        try:
            nees[t] = error @ np.linalg.solve(P_reg, error)
        except np.linalg.LinAlgError:
            nees[t] = error @ np.linalg.lstsq(P_reg, error, rcond=None)[0]

    return nees


def compute_nis(innovations, S_innov):
    """
    Compute Normalized Innovation Squared (NIS).

    NIS = y' S^{-1} y

    Parameters
    ----------
    innovations : ndarray [T, n_z]
        Innovation vectors y = z - Hx
    S_innov : ndarray [T, n_z, n_z]
        Innovation covariances

    Returns
    -------
    ndarray [T]
        NIS values at each time step
    """
    T = innovations.shape[0]
    nis = np.zeros(T)
    for t in range(T):
        nis[t] = innovations[t] @ np.linalg.solve(S_innov[t], innovations[t])
    return nis
