"""
Data Sanitization Utilities
Makes prepared chart options safe for JSON serialization.
Highcharts expects null for gaps; NaN and Inf are not valid JSON.
"""

import math
from typing import Any

import numpy as np


def sanitize_nan_values(obj: Any) -> Any:
    """
    Recursively sanitize NaN and Inf values in a data structure for JSON compatibility.

    Converts NaN and Inf to None (null in JSON) and unwraps numpy scalars,
    descending into lists, tuples and dicts.

    Args:
        obj: Data structure to sanitize (dict, list, float, or other types)

    Returns:
        Sanitized data structure with NaN/Inf values replaced by None

    Examples:
        >>> sanitize_nan_values({'a': float('nan'), 'b': 1.0})
        {'a': None, 'b': 1.0}

        >>> sanitize_nan_values([[1.0, float('inf')], [2.0, 3.0]])
        [[1.0, None], [2.0, 3.0]]
    """
    if isinstance(obj, dict):
        return {key: sanitize_nan_values(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [sanitize_nan_values(item) for item in obj]
    elif isinstance(obj, np.generic):
        return sanitize_nan_values(obj.item())
    elif isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            return None
        return obj
    else:
        return obj


def sanitize_for_json(data: Any) -> Any:
    """
    Alias for sanitize_nan_values for clarity in JSON serialization contexts.

    Args:
        data: Data to sanitize for JSON serialization

    Returns:
        JSON-safe data structure
    """
    return sanitize_nan_values(data)
