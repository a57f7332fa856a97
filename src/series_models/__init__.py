from .series_spec import (
    SeriesSpec,
    Row,
    DataPoint,
    PositionalPoint,
    HashPoint,
    Series,
    MYSQL_TIME,
    DATE_TIME,
    PLAIN_TIME,
    HASH_TIME_KEY,
    HASH_VALUE_KEY,
    is_buildable_series
)

__all__ = [
    'SeriesSpec',
    'Row',
    'DataPoint',
    'PositionalPoint',
    'HashPoint',
    'Series',
    'MYSQL_TIME',
    'DATE_TIME',
    'PLAIN_TIME',
    'HASH_TIME_KEY',
    'HASH_VALUE_KEY',
    'is_buildable_series'
]
