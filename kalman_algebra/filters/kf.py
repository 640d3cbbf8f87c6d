"""Kalman Filter (KF) over any type implementing EstimatorScalar."""
import logging
from dataclasses import dataclass
from typing import Generic, List, TypeVar

from .scalar import identity_minus, invert, transpose

logger = logging.getLogger(__name__)

T = TypeVar('T')

ORDERS = ('update_predict', 'predict_update')


@dataclass(frozen=True)
class KalmanFilter(Generic[T]):
    """
    Immutable linear estimator state.

    The same implementation serves scalar state (floats) and vector state
    (Matrix); every step returns a new filter and leaves ``self`` untouched.
    Errors raised by the underlying algebra (e.g. a misshaped model matrix)
    propagate unchanged.

    Attributes
    ----------
    state_estimate : T
        Current state estimate x, e.g. Matrix [n_x, 1]
    error_covariance : T
        Current error covariance P, e.g. Matrix [n_x, n_x]
    """

    state_estimate: T
    error_covariance: T

    def predict(self, state_transition_model, control_input_model,
                control_vector, process_noise_covariance):
        """
        Prediction step.

        x' = F x + B u
        P' = F P F^T + Q

        Parameters
        ----------
        state_transition_model : T [n_x, n_x]
            F
        control_input_model : T [n_x, n_u]
            B
        control_vector : T [n_u, 1]
            u
        process_noise_covariance : T [n_x, n_x]
            Q

        Returns
        -------
        KalmanFilter
        """
        F = state_transition_model
        x = F * self.state_estimate + control_input_model * control_vector
        P = F * self.error_covariance * transpose(F) + process_noise_covariance
        logger.debug("predict: x=%r", x)
        return type(self)(x, P)

    def innovation(self, measurement, observation_model, observation_noise_covariance):
        """
        Innovation and its covariance for a measurement.

        y = z - H x
        S = H P H^T + R

        Returns
        -------
        y : T [n_z, 1]
        S : T [n_z, n_z]
        """
        H = observation_model
        y = measurement - H * self.state_estimate
        S = H * self.error_covariance * transpose(H) + observation_noise_covariance
        return y, S

    def update(self, measurement, observation_model, observation_noise_covariance):
        """
        Measurement update step.

        K  = P H^T S^{-1}
        x' = x + K y
        P' = (I - K H) P

        S is inverted without a singularity check; a singular S gives
        inf/nan entries rather than an error.

        Parameters
        ----------
        measurement : T [n_z, 1]
            z
        observation_model : T [n_z, n_x]
            H
        observation_noise_covariance : T [n_z, n_z]
            R

        Returns
        -------
        KalmanFilter
        """
        H = observation_model
        y, S = self.innovation(measurement, H, observation_noise_covariance)
        K = self.error_covariance * transpose(H) * invert(S)
        x = self.state_estimate + K * y
        P = identity_minus(K * H) * self.error_covariance
        logger.debug("update: innovation=%r, x=%r", y, x)
        return type(self)(x, P)


def kalman_filter(initial, measurements, state_transition_model, control_input_model,
                  control_vector, process_noise_covariance, observation_model,
                  observation_noise_covariance, order='update_predict') -> List[KalmanFilter]:
    """
    Run a fixed-model Kalman filter over a sequence of measurements.

    Parameters
    ----------
    initial : KalmanFilter
        Filter holding the prior state estimate and covariance
    measurements : iterable of T
        Measurements z, one per cycle
    state_transition_model, control_input_model, control_vector,
    process_noise_covariance :
        F, B, u, Q passed to every predict step
    observation_model, observation_noise_covariance :
        H, R passed to every update step
    order : str
        'update_predict' (default) or 'predict_update'

    Returns
    -------
    list of KalmanFilter
        Filter after each cycle, one per measurement
    """
    if order not in ORDERS:
        raise ValueError(f"order must be one of {ORDERS}, got {order!r}")

    def predict(kf):
        return kf.predict(state_transition_model, control_input_model,
                          control_vector, process_noise_covariance)

    def update(kf, z):
        return kf.update(z, observation_model, observation_noise_covariance)

    kf = initial
    history = []
    for t, z in enumerate(measurements):
        if order == 'update_predict':
            kf = predict(update(kf, z))
        else:
            kf = update(predict(kf), z)
        history.append(kf)
        logger.debug("cycle %d complete", t)

    return history
