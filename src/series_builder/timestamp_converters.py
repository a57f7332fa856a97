"""
Timestamp converters: turn a row's time cell into Highcharts epoch milliseconds.

Each converter is a callable ``(row, spec) -> float``. Converters are looked up
by the series' ``timeType`` in a TimestampConverterRegistry; the built-in types
are 'mysql' (Unix seconds), 'date' (free-form date strings) and 'plain'
(already milliseconds). Callers add their own types by registering a callable
under a new tag:

    registry = default_registry()

    @registry.register('excel')
    def excel_serial(row, spec):
        return (float(row[spec.time]) - 25569) * 86400 * 1000
"""

from datetime import date, datetime
from typing import Any, Callable, Dict, Iterator, Optional

from dateutil import parser as date_parser

from series_config.env_vars import EnvVars
from series_models.series_spec import SeriesSpec, Row, MYSQL_TIME, DATE_TIME, PLAIN_TIME
from series_utils.error_handlers import ConfigurationError, ProcessingError, UnsupportedConversion
from series_utils.log_manager import LogManager
from series_utils.timezone_utils import assume_timezone, assume_utc, get_timezone, to_timestamp_ms
from series_builder.value_coercion import is_null, to_number

logger = LogManager().get_logger("TimestampConverters")

TimestampConverter = Callable[[Row, SeriesSpec], float]


def time_cell(row: Row, spec: SeriesSpec) -> Any:
    """Fetch the non-null time cell of a row."""
    if spec.time not in row:
        raise ConfigurationError(
            f"Time column '{spec.time}' not found in row",
            config_errors=[f"missing column: {spec.time}"]
        )
    value = row[spec.time]
    if is_null(value):
        raise ProcessingError(f"Null timestamp in column '{spec.time}'", processing_stage="timestamp")
    return value


def process_mysql_timestamp(row: Row, spec: SeriesSpec) -> float:
    """
    Converts a Unix timestamp in seconds to JS milliseconds.
    This is the default converter. Drivers that hand back datetimes for
    TIMESTAMP columns are also accepted; naive values are read as UTC.
    """
    value = time_cell(row, spec)
    if isinstance(value, datetime):
        return to_timestamp_ms(assume_utc(value))
    return 1000 * to_number(value, spec.time)


def _date_timezone():
    name = EnvVars().date_timezone
    try:
        return get_timezone(name)
    except ValueError as e:
        raise ConfigurationError(str(e), config_errors=[f"SERIES_DATE_TIMEZONE={name}"]) from e


def process_date_string(row: Row, spec: SeriesSpec) -> float:
    """
    Parses a free-form date string and converts it to JS milliseconds.
    Dates without an offset are read in the SERIES_DATE_TIMEZONE zone.
    """
    value = time_cell(row, spec)
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        try:
            parsed = date_parser.parse(str(value))
        except (ValueError, OverflowError) as e:
            raise ProcessingError(
                f"Cannot parse date {value!r} in column '{spec.time}': {e}",
                processing_stage="timestamp"
            ) from e
    return to_timestamp_ms(assume_timezone(parsed, _date_timezone()))


def process_plain_timestamp(row: Row, spec: SeriesSpec) -> float:
    """Using this means your time column already holds JS milliseconds."""
    return to_number(time_cell(row, spec), spec.time)


class TimestampConverterRegistry:
    """
    Mapping from timeType tag to converter.

    Lookups of unknown tags raise UnsupportedConversion. Registries are
    independent: registering on one never affects another.
    """

    def __init__(self, converters: Optional[Dict[str, TimestampConverter]] = None):
        self._converters: Dict[str, TimestampConverter] = dict(converters or {})

    def register(self, time_type: str, converter: Optional[TimestampConverter] = None):
        """
        Register a converter for a tag. Usable directly or as a decorator.

        Args:
            time_type: The timeType tag series will use
            converter: Callable (row, spec) -> epoch milliseconds

        Returns:
            The converter (so the decorator form leaves the function usable)
        """
        if not time_type:
            raise ValueError("time_type must be a non-empty string")

        def _register(func: TimestampConverter) -> TimestampConverter:
            if not callable(func):
                raise TypeError(f"Converter for '{time_type}' must be callable")
            if time_type in self._converters:
                logger.info(f"Overriding timestamp converter '{time_type}'")
            self._converters[time_type] = func
            return func

        if converter is None:
            return _register
        return _register(converter)

    def get(self, time_type: str) -> TimestampConverter:
        try:
            return self._converters[time_type]
        except KeyError:
            raise UnsupportedConversion(time_type) from None

    def copy(self) -> "TimestampConverterRegistry":
        return TimestampConverterRegistry(self._converters)

    def __contains__(self, time_type: str) -> bool:
        return time_type in self._converters

    def __iter__(self) -> Iterator[str]:
        return iter(self._converters)

    def __len__(self) -> int:
        return len(self._converters)


def default_registry() -> TimestampConverterRegistry:
    """A fresh registry holding the built-in 'mysql', 'date' and 'plain' converters."""
    return TimestampConverterRegistry({
        MYSQL_TIME: process_mysql_timestamp,
        DATE_TIME: process_date_string,
        PLAIN_TIME: process_plain_timestamp,
    })
