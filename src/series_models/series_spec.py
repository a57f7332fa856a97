"""
Series definitions - the validated form of one entry of a chart's 'series' option.
"""

from typing import Any, Dict, List, Mapping, Optional, Union
from pydantic import BaseModel, ConfigDict, Field as PydanticField, model_validator

Row = Mapping[str, Any]

PositionalPoint = List[Optional[float]]
HashPoint = Dict[str, Optional[float]]
DataPoint = Union[PositionalPoint, HashPoint]
Series = List[DataPoint]

MYSQL_TIME = "mysql"
DATE_TIME = "date"
PLAIN_TIME = "plain"

# Highstock reads the timestamp of a hash point from 'x' and its main value from 'y'
HASH_TIME_KEY = "x"
HASH_VALUE_KEY = "y"


def is_buildable_series(raw: Mapping[str, Any]) -> bool:
    """A series is rebuilt from rows only when it names both a time column and data columns."""
    time = raw.get("time")
    return time is not None and raw.get("data") is not None and not isinstance(time, (list, tuple))


class SeriesSpec(BaseModel):
    """
    Typed view of one entry of the chart's 'series' option.

    Unknown keys (name, type, color, yAxis, ...) are allowed and left for the
    charting library; only the keys below drive the row transform.
    """
    model_config = ConfigDict(extra='allow', populate_by_name=True)

    time: str
    data: Union[str, List[str], Dict[str, str]]
    time_type: Optional[str] = PydanticField(None, alias="timeType")
    hash_data_points: bool = PydanticField(False, alias="hashDataPoints")
    remove_nulls: bool = PydanticField(False, alias="removeNulls")

    @model_validator(mode='after')
    def validate_columns(self):
        if not self.time:
            raise ValueError("'time' must name a column")
        if not self.data:
            raise ValueError("'data' must name at least one column")
        if self.hash_data_points and not isinstance(self.data, dict):
            raise ValueError("'hashDataPoints' requires 'data' to map point keys to columns")
        if self.hash_data_points and HASH_TIME_KEY in self.data:
            raise ValueError(f"'{HASH_TIME_KEY}' is reserved for the timestamp in hash data points")
        if self.remove_nulls and self.hash_data_points and HASH_VALUE_KEY not in self.data:
            raise ValueError(f"'removeNulls' with hash data points requires a '{HASH_VALUE_KEY}' column")
        return self

    @property
    def is_single_column(self) -> bool:
        return isinstance(self.data, str)

    def value_columns(self) -> List[str]:
        """Source columns in output order."""
        if isinstance(self.data, str):
            return [self.data]
        if isinstance(self.data, dict):
            return list(self.data.values())
        return list(self.data)

    def primary_column(self) -> str:
        """The column whose null value drops a row when removeNulls is set."""
        if self.hash_data_points:
            return self.data[HASH_VALUE_KEY]
        return self.value_columns()[0]

    def resolve_time_type(self, default: str) -> str:
        return self.time_type or default
