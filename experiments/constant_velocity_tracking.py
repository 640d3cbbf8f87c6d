"""Constant-velocity tracking with the matrix and scalar Kalman filters.

Usage:
    python experiments/constant_velocity_tracking.py --seed 0
    python experiments/constant_velocity_tracking.py --steps 100 --plot
"""
import argparse
import logging
import os
import sys
import time
from dataclasses import dataclass

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from kalman_algebra import KalmanFilter, Matrix, kalman_filter
from kalman_algebra.ssm import linear_gaussian_ssm
from kalman_algebra.utils import compute_nees, compute_rmse, plot_kalman_filter, stack_estimates


@dataclass
class ExperimentConfig:
    """Model and run parameters."""
    steps: int = 50
    dt: float = 1.0
    process_noise: float = 0.01
    measurement_noise: float = 1.0
    initial_variance: float = 1000.0
    seed: int = 42
    plot: bool = False
    output_dir: str = os.path.join(os.path.dirname(__file__), '..', 'results', 'constant_velocity')


def build_model(config):
    """Constant-velocity model observing position only."""
    dt = config.dt
    q = config.process_noise
    return {
        'F': Matrix.from_rows([[1.0, dt], [0.0, 1.0]]),
        'B': Matrix.identity(2),
        'u': Matrix.zero_vector(2),
        'Q': Matrix.from_rows([[q * dt**3 / 3, q * dt**2 / 2],
                               [q * dt**2 / 2, q * dt]]),
        'H': Matrix.from_rows([[1.0, 0.0]]),
        'R': Matrix.from_rows([[config.measurement_noise]]),
    }


def run_matrix_filter(model, zs, config):
    """Run the matrix filter in predict-then-update order."""
    initial = KalmanFilter(
        Matrix.zero_vector(2),
        Matrix.identity(2) * config.initial_variance,
    )
    measurements = [Matrix.vector(z) for z in zs]
    return kalman_filter(
        initial, measurements,
        model['F'], model['B'], model['u'], model['Q'],
        model['H'], model['R'],
        order='predict_update',
    )


def run_scalar_filter(zs, config):
    """Random-walk position filter on the same measurements, using floats."""
    initial = KalmanFilter(0.0, config.initial_variance)
    q = config.process_noise * config.dt
    return kalman_filter(
        initial, [float(z[0]) for z in zs],
        1.0, 0.0, 0.0, q,
        1.0, config.measurement_noise,
        order='predict_update',
    )


def main():
    defaults = ExperimentConfig()
    parser = argparse.ArgumentParser(description="Constant-velocity Kalman filter tracking")
    parser.add_argument("--steps", type=int, default=defaults.steps)
    parser.add_argument("--dt", type=float, default=defaults.dt)
    parser.add_argument("--process_noise", type=float, default=defaults.process_noise)
    parser.add_argument("--measurement_noise", type=float, default=defaults.measurement_noise)
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--plot", action="store_true")
    parser.add_argument("--output_dir", type=str, default=defaults.output_dir)
    parser.add_argument("--verbose", action="store_true", help="Log every filter step")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = ExperimentConfig(
        steps=args.steps,
        dt=args.dt,
        process_noise=args.process_noise,
        measurement_noise=args.measurement_noise,
        seed=args.seed,
        plot=args.plot,
        output_dir=args.output_dir,
    )

    model = build_model(config)
    rng = np.random.default_rng(config.seed)
    xs, zs = linear_gaussian_ssm(
        model['F'], model['B'], model['u'], model['Q'], model['H'], model['R'],
        x0=np.array([0.0, 1.0]), T=config.steps, rng=rng,
    )

    t0 = time.perf_counter()
    filters = run_matrix_filter(model, zs, config)
    runtime_ms = (time.perf_counter() - t0) * 1000
    m_filt, P_filt = stack_estimates(filters)

    scalar_filters = run_scalar_filter(zs, config)
    m_scalar = np.array([kf.state_estimate for kf in scalar_filters])

    nees = compute_nees(m_filt, P_filt, xs)

    print(f"{'Filter':<20} {'Pos RMSE':<12} {'Vel RMSE':<12} {'Mean NEES':<12} {'Runtime(ms)'}")
    print(f"{'Matrix (CV)':<20} {compute_rmse(m_filt[:, 0], xs[:, 0]):<12.4f} "
          f"{compute_rmse(m_filt[:, 1], xs[:, 1]):<12.4f} {np.mean(nees):<12.3f} {runtime_ms:.2f}")
    print(f"{'Scalar (RW)':<20} {compute_rmse(m_scalar, xs[:, 0]):<12.4f} "
          f"{'---':<12} {'---':<12} ---")

    if config.plot:
        os.makedirs(config.output_dir, exist_ok=True)
        save_path = os.path.join(config.output_dir, f'tracking_seed{config.seed}.png')
        plot_kalman_filter(xs, m_filt, P_filt, zs=zs, measured_states=[0],
                           save_path=save_path, title='Constant Velocity KF')
        print(f"Plot saved: {save_path}")


if __name__ == "__main__":
    main()
