"""
Series Builder - reshapes tabular rows into Highstock 'series' data.

Given rows from a data source and the chart's series options, every series
that names a 'time' column and 'data' column(s) gets its 'data' replaced with
time-sorted data points and its 'time' key removed:

    {'name': 'Rank', 'time': 'RankDate', 'data': 'SiteRank'}
        -> {'name': 'Rank', 'data': [[1704067200000.0, 12.0], ...]}

Point shapes:
    - 'data': 'col'                               -> [time, value]
    - 'data': ['low', 'high']                     -> [time, low, high]
    - 'data': {'low': 'lo', 'high': 'hi'} with
      'hashDataPoints': True                      -> {'low': ..., 'high': ..., 'x': time}

Null handling: values that are null stay null in the point so the chart
shows a gap. With 'removeNulls' the whole row is skipped for that series
when its primary column (the single column, the first listed column, or
the 'y' column of hash points) is null.
"""

import copy
from operator import itemgetter
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from series_config.env_vars import EnvVars
from series_models.series_spec import (
    SeriesSpec, Row, DataPoint, Series, HASH_TIME_KEY, is_buildable_series
)
from series_utils.error_handlers import (
    ConfigurationError, ProcessingError, SeriesError, create_error_response
)
from series_utils.log_manager import LogManager
from series_builder.timestamp_converters import TimestampConverterRegistry, default_registry
from series_builder.value_coercion import is_null, to_number

logger = LogManager().get_logger("SeriesBuilder")


class SeriesBuilder:
    """
    Builds Highstock series data from rows and series options.

    The builder never mutates its inputs: build() returns new series dicts
    and passes non-buildable series through as deep copies.
    """

    def __init__(self, converters: Optional[TimestampConverterRegistry] = None,
                 default_time_type: Optional[str] = None):
        """
        Args:
            converters: Registry used to resolve 'timeType'; defaults to the built-ins
            default_time_type: Used when a series has no 'timeType'; defaults to
                SERIES_DEFAULT_TIME_TYPE
        """
        self.converters = converters if converters is not None else default_registry()
        self.default_time_type = default_time_type or EnvVars().default_time_type

    def build(self, rows: Iterable[Row], specs: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        """
        Build every series from the same rows.

        Args:
            rows: Rows from the data source (consumed once)
            specs: The chart's 'series' option

        Returns:
            New list of series dicts ready for the charting library

        Raises:
            ConfigurationError: A buildable series is malformed or names a missing column
            UnsupportedConversion: A series' timeType has no registered converter
            ProcessingError: A cell cannot be converted to a number or timestamp
        """
        rows = list(rows)
        specs = list(specs)
        logger.info(f"Building {len(specs)} series from {len(rows)} rows")
        return [self._build_spec(rows, raw) for raw in specs]

    def build_independently(self, rows: Iterable[Row],
                            specs: Iterable[Mapping[str, Any]]) -> Tuple[List[Optional[Dict[str, Any]]], Dict[int, Dict[str, Any]]]:
        """
        Build each series on its own so one bad series does not sink the rest.

        Returns:
            Tuple of (built series, errors) where errors maps the index of each
            failed series in ``specs`` to its error payload. A failed series
            leaves None in its slot, so ``built[i]`` always matches ``specs[i]``.
        """
        rows = list(rows)
        built = []
        errors = {}
        for index, raw in enumerate(specs):
            try:
                built.append(self._build_spec(rows, raw))
            except SeriesError as e:
                built.append(None)
                errors[index] = create_error_response(e)
        if errors:
            logger.warning(f"{len(errors)} series failed to build: indexes {sorted(errors)}")
        return built, errors

    def build_series(self, rows: Iterable[Row], spec: Mapping[str, Any]) -> Series:
        """
        Build the sorted data points of a single buildable series.

        Raises:
            ConfigurationError: If the series has no usable 'time'/'data'
        """
        if not is_buildable_series(spec):
            raise ConfigurationError(
                "Series needs a 'time' column name and 'data' column(s)",
                config_errors=["time and data are required; time must not be a list"]
            )
        return self._build_points(list(rows), self.parse_spec(spec))

    @staticmethod
    def parse_spec(raw: Mapping[str, Any]) -> SeriesSpec:
        try:
            return SeriesSpec.model_validate(dict(raw))
        except ValidationError as e:
            messages = [f"{'.'.join(str(part) for part in err['loc']) or 'series'}: {err['msg']}"
                        for err in e.errors()]
            raise ConfigurationError(
                f"Invalid series '{raw.get('name', raw.get('time'))}'",
                config_errors=messages
            ) from e

    def _build_spec(self, rows: List[Row], raw: Mapping[str, Any]) -> Dict[str, Any]:
        if not is_buildable_series(raw):
            return copy.deepcopy(dict(raw))

        spec = self.parse_spec(raw)
        points = self._build_points(rows, spec)

        result = {}
        for key, value in raw.items():
            if key == 'time':
                continue
            result[key] = points if key == 'data' else copy.deepcopy(value)
        return result

    def _build_points(self, rows: List[Row], spec: SeriesSpec) -> Series:
        time_type = spec.resolve_time_type(self.default_time_type)
        convert_timestamp = self.converters.get(time_type)

        points = []
        dropped = 0
        for row in rows:
            if self._should_drop(row, spec):
                dropped += 1
                continue
            time = convert_timestamp(row, spec)
            if time is None:
                raise ProcessingError(
                    f"Converter '{time_type}' returned no timestamp for column '{spec.time}'",
                    processing_stage="timestamp"
                )
            points.append(self.extract_values(row, spec, time))

        if dropped:
            logger.debug(f"Dropped {dropped} rows with null '{spec.primary_column()}' for series on '{spec.time}'")
        logger.debug(f"Built {len(points)} points for series on '{spec.time}' (timeType={time_type})")
        return self.sort_points(points, spec.hash_data_points)

    @staticmethod
    def _require_column(row: Row, column: str) -> Any:
        if column not in row:
            raise ConfigurationError(
                f"Data column '{column}' not found in row",
                config_errors=[f"missing column: {column}"]
            )
        return row[column]

    @classmethod
    def _should_drop(cls, row: Row, spec: SeriesSpec) -> bool:
        if not spec.remove_nulls:
            return False
        column = spec.primary_column()
        if spec.is_single_column:
            return is_null(row.get(column))
        return is_null(cls._require_column(row, column))

    @classmethod
    def extract_values(cls, row: Row, spec: SeriesSpec, time: float) -> DataPoint:
        """
        Shape one row into a data point.

        A missing single column is read as null; a missing column in array or
        hash mode is a configuration error.
        """
        if spec.is_single_column:
            return [time, to_number(row.get(spec.data), spec.data)]

        def column_value(column: str) -> Optional[float]:
            return to_number(cls._require_column(row, column), column)

        if spec.hash_data_points:
            point = {key: column_value(column) for key, column in spec.data.items()}
            point[HASH_TIME_KEY] = time
            return point

        return [time] + [column_value(column) for column in spec.value_columns()]

    @staticmethod
    def sort_points(points: Series, hash_data_points: bool) -> Series:
        """Sort points by timestamp, ascending. Equal timestamps keep row order."""
        key = itemgetter(HASH_TIME_KEY) if hash_data_points else itemgetter(0)
        return sorted(points, key=key)
