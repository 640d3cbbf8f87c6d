"""Linear Gaussian State Space Model (LGSSM)."""
import numpy as np

from ..linalg import Matrix


def _as_array(value):
    if isinstance(value, Matrix):
        return value.to_numpy()
    return np.asarray(value, dtype=float)


def linear_gaussian_ssm(F, B, u, Q, H, R, x0, T, rng):
    """
    Simulate a controlled Linear Gaussian SSM.

    x[t] = F x[t-1] + B u + w,   w ~ N(0, Q)
    z[t] = H x[t] + v,           v ~ N(0, R)

    Model inputs may be Matrix instances or array_like. Zero covariance
    blocks give deterministic dynamics or noiseless measurements.

    Parameters
    ----------
    F : [n_x, n_x]
        State transition matrix
    B : [n_x, n_u]
        Control input model
    u : [n_u] or [n_u, 1]
        Constant control vector
    Q : [n_x, n_x]
        Process noise covariance
    H : [n_z, n_x]
        Observation matrix
    R : [n_z, n_z]
        Observation noise covariance
    x0 : [n_x] or [n_x, 1]
        Initial state
    T : int
        Number of time steps
    rng : numpy.random.Generator

    Returns
    -------
    xs : ndarray [T, n_x]
        Latent states
    zs : ndarray [T, n_z]
        Observations
    """
    F, B, Q, H, R = (_as_array(m) for m in (F, B, Q, H, R))
    u = _as_array(u).reshape(-1)
    x = _as_array(x0).reshape(-1)
    n_x, n_z = F.shape[0], H.shape[0]

    xs = np.zeros((T, n_x))
    zs = np.zeros((T, n_z))

    for t in range(T):
        x = F @ x + B @ u + rng.multivariate_normal(np.zeros(n_x), Q)
        z = H @ x + rng.multivariate_normal(np.zeros(n_z), R)
        xs[t], zs[t] = x, z

    return xs, zs
