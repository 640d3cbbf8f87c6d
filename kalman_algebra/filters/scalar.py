"""
Algebraic capabilities required of Kalman filter state.

Any type offering ``+``, ``-``, ``*`` and the three unary operations below can
drive KalmanFilter. Matrix implements them as methods; real numbers are
registered here, where transposition is the identity, inversion is the
reciprocal and identity-minus is ``1 - x``.
"""
import functools
import numbers
from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class EstimatorScalar(Protocol):
    """Structural interface for values usable as estimator state."""

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def transposed(self): ...

    def inversed(self): ...

    def identity_minus(self): ...


def _require_capabilities(value):
    if not isinstance(value, EstimatorScalar):
        raise TypeError(f"{type(value).__name__} does not implement EstimatorScalar")
    return value


@functools.singledispatch
def transpose(value):
    """Transpose of ``value``."""
    return _require_capabilities(value).transposed()


@functools.singledispatch
def invert(value):
    """
    Inverse of ``value``.

    Singular inputs are not rejected: a zero scalar gives +-inf and a singular
    matrix gives inf/nan elements.
    """
    return _require_capabilities(value).inversed()


@functools.singledispatch
def identity_minus(value):
    """``I - value`` (``1 - value`` for scalars)."""
    return _require_capabilities(value).identity_minus()


@transpose.register(numbers.Real)
def _transpose_real(value):
    return value


@invert.register(numbers.Real)
def _invert_real(value):
    with np.errstate(divide='ignore'):
        return float(np.float64(1.0) / np.float64(value))


@identity_minus.register(numbers.Real)
def _identity_minus_real(value):
    return 1 - value
