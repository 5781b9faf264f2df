"""
Utility functions.
"""

import numpy as np

from .exceptions import EmptyInputError, LengthMismatchError


def as_series(values, name='values'):
    """
    Convert to a 1-d float64 array. NaN is allowed.

    A single-column 2-d array, shape (n, 1), is flattened; other
    multi-dimensional input is rejected.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim == 0:
        raise ValueError(f"{name} must be a sequence, got a scalar")
    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr[:, 0]
    elif arr.ndim != 1:
        raise ValueError(f"{name} must be 1-dimensional, got shape {arr.shape}")
    return arr


def check_nonempty(values, name='values'):
    """Validate a plotting input has at least one value."""
    if len(values) == 0:
        raise EmptyInputError(f"{name} is empty")
    return values


def check_paired(xs, ys, x_name='xs', y_name='ys'):
    """Validate paired sequences and return them as float arrays."""
    xs = as_series(xs, x_name)
    ys = as_series(ys, y_name)
    if len(xs) != len(ys):
        raise LengthMismatchError(
            f"{x_name} and {y_name} differ in length: {len(xs)} != {len(ys)}"
        )
    return xs, ys


def nan_to_zero(values):
    """
    Replace NaN with 0 for display.

    Missing cells stay visible at the axis origin instead of being dropped.
    Returns a new array and the number of substituted entries.
    """
    mask = np.isnan(values)
    return np.where(mask, 0.0, values), int(mask.sum())


def as_scalar(value, name='value'):
    """Accept a scalar or a one-element sequence and return a float."""
    arr = np.asarray(value, dtype=np.float64).reshape(-1)
    if arr.size != 1:
        raise ValueError(f"{name} must be a scalar or one-element sequence, got {arr.size} values")
    return float(arr[0])
