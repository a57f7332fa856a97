"""
Reshapes tabular rows into Highcharts/Highstock series data.
"""

from series_builder.series_builder import SeriesBuilder
from series_builder.timestamp_converters import (
    TimestampConverterRegistry,
    default_registry,
    process_mysql_timestamp,
    process_date_string,
    process_plain_timestamp
)
from series_builder.data_providers import DataProvider, ListDataProvider, DataFrameDataProvider
from series_builder.highstock_widget import ActiveHighstockWidget

__all__ = [
    'SeriesBuilder',
    'TimestampConverterRegistry',
    'default_registry',
    'process_mysql_timestamp',
    'process_date_string',
    'process_plain_timestamp',
    'DataProvider',
    'ListDataProvider',
    'DataFrameDataProvider',
    'ActiveHighstockWidget'
]
