# array.py
#
# Extrema of numpy arrays, whole or along an axis

import warnings

import numpy as np

from .base import MinMax


def extrema_array(array, axis=None):
    '''
    Finds the minimum and maximum of a numpy array, either over all of its elements or
    along one axis. As with :func:`extrema.extrema`, fewer than 2 elements means no extrema.
    This is a vectorized reduction that reads the data more than once, so unlike
    :func:`extrema.extrema` it needs an array already in memory.

    NaN is not ordered against other values, so any NaNs are ignored (with a RuntimeWarning)
    and do not count towards the 2 elements. When reducing along an axis, a slice with
    fewer than 2 non-NaN values has no extrema and comes out as [NaN, NaN].

    Args:
        array (nd array): data of any shape
        axis (int, optional): axis to reduce. If None, the array is flattened first.

    Returns:
        MinMax, nd array, or None: if axis is None, a MinMax of numpy scalars. Otherwise an
            array shaped like the input with `axis` removed and a trailing axis of length 2
            holding (min, max). None if there are fewer than 2 elements to compare
            (for axis=None, fewer than 2 non-NaN elements).

    Example:
        >>> lo, hi = extrema_array(np.array([[1, 5], [7, 3]]))
        >>> int(lo), int(hi)
        (1, 7)
        >>> extrema_array(np.array([[1, 5], [7, 3]]), axis=0)
        array([[1, 7],
               [3, 5]])
    '''
    array = np.asarray(array)
    n = array.size if axis is None else array.shape[axis]
    if n < 2:
        return None

    if not (np.issubdtype(array.dtype, np.inexact) and np.isnan(array).any()):
        if axis is None:
            return MinMax(np.min(array), np.max(array))
        return np.stack([np.min(array, axis=axis), np.max(array, axis=axis)], axis=-1)

    warnings.warn("NaN values have no order and will be ignored", RuntimeWarning)
    counts = np.count_nonzero(~np.isnan(array), axis=axis)
    if axis is None:
        if counts < 2:
            return None
        return MinMax(np.nanmin(array), np.nanmax(array))

    result = np.stack([np.nanmin(array, axis=axis), np.nanmax(array, axis=axis)], axis=-1)
    result[counts < 2] = np.nan
    return result


def extrema_rows(array):
    '''
    Finds the minimum and maximum of each row of a 2d array. Mirrors MATLAB's minmax:
    https://www.mathworks.com/help/deeplearning/ref/minmax.html

    Args:
        array (nrow, ncol): 2d data array

    Raises:
        ValueError: if the array is not 2d

    Returns:
        (nrow, 2) array or None: [min, max] of each row, or None if there are fewer than
            2 columns
    '''
    array = np.asarray(array)
    if array.ndim != 2:
        raise ValueError("Array must be of dimension 2")

    return extrema_array(array, axis=1)
