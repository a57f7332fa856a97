"""
ActiveHighstockWidget - binds chart options to a data provider.

Usage:

    widget = ActiveHighstockWidget(
        options={
            'title': {'text': 'Site Percentile'},
            'yAxis': {'title': {'text': 'Site Rank'}},
            'series': [
                {
                    'name': 'Site percentile',
                    'data': 'SiteRank12',     # data column in the data provider
                    'time': 'RankDate',       # time column in the data provider
                    # 'timeType': 'date',     # defaults to 'mysql'; also 'date' or 'plain'
                },
                {
                    'name': 'Site range',
                    'time': 'RankDate',
                    'type': 'arearange',
                    'data': ['Column1', 'Column2'],   # [time, low, high] points
                },
            ],
        },
        data_provider=ListDataProvider(rows),
    )
    options = widget.prepare_options()

Rendering the options is left to the charting front end; to skip null
points use 'removeNulls' on the series or 'connectNulls' in Highstock.
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

from series_builder.data_providers import DataProvider
from series_builder.series_builder import SeriesBuilder
from series_builder.timestamp_converters import TimestampConverterRegistry
from series_utils.config_loader import ConfigLoader
from series_utils.data_sanitization import sanitize_for_json
from series_utils.error_handlers import ConfigurationError
from series_utils.log_manager import LogManager

logger = LogManager().get_logger("ActiveHighstockWidget")


class ActiveHighstockWidget:

    def __init__(self, options: Dict[str, Any], data_provider: DataProvider,
                 converters: Optional[TimestampConverterRegistry] = None):
        """
        Args:
            options: Highstock options; entries of 'series' with 'time' and 'data'
                are filled from the data provider
            data_provider: Source of rows
            converters: Timestamp converters for custom 'timeType' tags
        """
        if not isinstance(options, dict):
            raise ConfigurationError(f"Chart options must be a dict, got {type(options).__name__}")
        series = options.get('series')
        if series is not None and not isinstance(series, list):
            raise ConfigurationError(f"'series' must be a list, got {type(series).__name__}")
        self.options = options
        self.data_provider = data_provider
        self.builder = SeriesBuilder(converters=converters)

    @classmethod
    def from_config_file(cls, filepath: Union[str, Path], data_provider: DataProvider,
                         converters: Optional[TimestampConverterRegistry] = None) -> "ActiveHighstockWidget":
        success, options, error_msg = ConfigLoader().load_chart_options(filepath)
        if not success:
            raise ConfigurationError(error_msg, config_errors=[error_msg])
        return cls(options, data_provider, converters=converters)

    def prepare_options(self, sanitize: bool = True) -> Dict[str, Any]:
        """
        Build the options handed to Highstock.

        Args:
            sanitize: Replace NaN/Inf with None so the result is JSON-safe

        Returns:
            A new options dict; self.options is left untouched
        """
        prepared = {key: copy.deepcopy(value) for key, value in self.options.items() if key != 'series'}
        if 'series' not in self.options:
            return sanitize_for_json(prepared) if sanitize else prepared

        rows = self.data_provider.get_data()
        prepared['series'] = self.builder.build(rows, self.options['series'])
        logger.info(f"Prepared {len(prepared['series'])} series from {len(rows)} rows")
        return sanitize_for_json(prepared) if sanitize else prepared
