"""
Cell value coercion shared by timestamp conversion and value extraction.

Null policy: None, float NaN and NaT (pandas missing values) and blank strings are
null. Everything else must be numeric or a numeric string.
"""

import math
from decimal import Decimal
from typing import Any, Optional

import numpy as np
import pandas as pd

from series_utils.error_handlers import ProcessingError


def is_null(value: Any) -> bool:
    if isinstance(value, np.generic):
        value = value.item()
    if value is None or value is pd.NaT:
        return True
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, str):
        return not value.strip()
    return False


def to_number(value: Any, column: str = "") -> Optional[float]:
    """
    Coerce a cell to float, propagating null.

    Args:
        value: Raw cell value
        column: Column name, used in the error message

    Returns:
        float, or None for null cells

    Raises:
        ProcessingError: If the value is not numeric
    """
    if is_null(value):
        return None
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, (bool, int, float, Decimal)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    where = f" in column '{column}'" if column else ""
    raise ProcessingError(f"Non-numeric value{where}: {value!r}", processing_stage="value_coercion")
