"""
Coverage Reducer Time Coordinate Processing

This module handles time value normalization and nearest-time index selection
along the time axis of a point series.
"""

from typing import Optional, Sequence
from datetime import datetime, timezone
import numpy as np

from ..core.config import DATETIME_PRECISION, NOT_FOUND
from ..core.core_types import TimeValue
from ..core.exceptions import ParameterError, CoordinateError

_DATETIME_DTYPE = f'datetime64[{DATETIME_PRECISION}]'

# ============================================================================
# Time Value Normalization
# ============================================================================

def normalize_time_value(time_value: TimeValue) -> np.datetime64:
    """
    Normalize various time formats to numpy.datetime64.

    Timezone-aware datetimes are converted to UTC; naive values are taken
    to be UTC already.

    Args:
        time_value: Time value (str, datetime, or np.datetime64)

    Returns:
        np.datetime64: Normalized time value

    Raises:
        ParameterError: If time format is invalid
    """
    try:
        if isinstance(time_value, np.datetime64):
            return time_value.astype(_DATETIME_DTYPE)

        if isinstance(time_value, str):
            # fromisoformat only accepts a trailing Z from Python 3.11
            if time_value.endswith(("Z", "z")):
                time_value = time_value[:-1] + "+00:00"
            time_value = datetime.fromisoformat(time_value)

        if isinstance(time_value, datetime):
            if time_value.tzinfo is not None:
                time_value = time_value.astimezone(timezone.utc).replace(tzinfo=None)
            return np.datetime64(time_value, DATETIME_PRECISION)

        return np.datetime64(time_value, DATETIME_PRECISION)

    except Exception as e:
        raise ParameterError("time_value", str(time_value), f"Cannot parse time value: {e}")

def normalize_time_array(times: Sequence[TimeValue]) -> np.ndarray:
    """
    Normalize a sequence of time values to a datetime64[ns] array.

    Args:
        times: Time values in any format accepted by normalize_time_value

    Returns:
        np.ndarray: One-dimensional datetime64[ns] array
    """
    arr = np.asarray(times)
    if np.issubdtype(arr.dtype, np.datetime64):
        return arr.astype(_DATETIME_DTYPE).reshape(-1)
    return np.array([normalize_time_value(t) for t in arr.reshape(-1)], dtype=_DATETIME_DTYPE)

def current_time() -> np.datetime64:
    """Current wall-clock instant as a naive UTC datetime64."""
    return normalize_time_value(datetime.now(timezone.utc))

# ============================================================================
# Nearest-Time Selection
# ============================================================================

def _validate_times(times: np.ndarray) -> None:
    if np.isnat(times).any():
        raise CoordinateError("time", "Time axis contains NaT values")

def get_index_of_closest_time_to(target: TimeValue, times: Sequence[TimeValue]) -> int:
    """
    Find the index of the time closest to a target.

    When two times are equally close, the lowest index wins.

    Args:
        target: Target time
        times: Time axis values

    Returns:
        int: Index into ``times``, or NOT_FOUND if ``times`` is empty

    Raises:
        CoordinateError: If the axis contains NaT
        ParameterError: If the target is NaT
    """
    axis = normalize_time_array(times)
    if axis.size == 0:
        return NOT_FOUND
    _validate_times(axis)

    target = normalize_time_value(target)
    if np.isnat(target):
        raise ParameterError("target_t", str(target), "Target time must not be NaT")

    # Exact integer distances; ns differences overflow int64 beyond ~292 years
    target_ns = int(target.astype(np.int64))
    distances = [abs(t - target_ns) for t in axis.view(np.int64).tolist()]
    return min(range(len(distances)), key=distances.__getitem__)

def get_closest_to_current_time(times: Sequence[TimeValue], now: Optional[TimeValue] = None) -> Optional[np.datetime64]:
    """
    Find the time value closest to the current instant.

    Args:
        times: Time axis values
        now: Override for the current instant

    Returns:
        Optional[np.datetime64]: Closest time, or None for an empty axis
    """
    index = closest_time_index(times, now=now)
    if index == NOT_FOUND:
        return None
    return normalize_time_array(times)[index]

def closest_time_index(
    times: Sequence[TimeValue],
    target_t: Optional[TimeValue] = None,
    now: Optional[TimeValue] = None
) -> int:
    """
    Select the best-matching index along a time axis.

    Without a target, the time closest to ``now`` (default: the current
    wall-clock instant) is selected. Ties go to the lowest index.

    Args:
        times: Time axis values
        target_t: Target time, or None for the default policy
        now: Override for the current instant

    Returns:
        int: Index into ``times``, or NOT_FOUND if ``times`` is empty
    """
    if target_t is None:
        target_t = now if now is not None else current_time()
    return get_index_of_closest_time_to(target_t, times)
