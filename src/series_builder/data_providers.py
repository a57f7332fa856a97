"""
Row sources for the series builder.

A DataProvider hands over the full result set once through get_data(); the
builder never paginates, caches or re-queries.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping

import pandas as pd

from series_models.series_spec import Row
from series_utils.error_handlers import ConfigurationError
from series_utils.log_manager import LogManager

logger = LogManager().get_logger("DataProviders")


class DataProvider(ABC):

    @abstractmethod
    def get_data(self) -> List[Row]:
        """Return every row, in source order."""
        pass


class ListDataProvider(DataProvider):
    """Rows already in memory, e.g. a database cursor's fetchall()."""

    def __init__(self, rows: Iterable[Mapping[str, Any]]):
        self._rows = list(rows)
        for index, row in enumerate(self._rows):
            if not isinstance(row, Mapping):
                raise ConfigurationError(
                    f"Row {index} is a {type(row).__name__}, expected a mapping of column to value",
                    config_errors=[f"row {index}: not a mapping"]
                )

    def get_data(self) -> List[Row]:
        return list(self._rows)


class DataFrameDataProvider(DataProvider):
    """
    Rows from a pandas DataFrame, one per record.

    Missing cells come through as NaN, which the builder treats as null. A
    named index (e.g. a DatetimeIndex called 'timestamp') can be exposed as a
    column with include_index=True.
    """

    def __init__(self, frame: pd.DataFrame, include_index: bool = False):
        if not isinstance(frame, pd.DataFrame):
            raise ConfigurationError(
                f"Expected a pandas DataFrame, got {type(frame).__name__}"
            )
        if include_index:
            frame = frame.reset_index()
        self._frame = frame

    def get_data(self) -> List[Dict[str, Any]]:
        records = self._frame.to_dict(orient='records')
        logger.debug(f"DataFrame provider returned {len(records)} rows")
        return records
