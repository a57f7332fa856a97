"""
Chart Options File Loading
Loads declarative chart options (including series definitions) from JSON files.
"""

import json
from pathlib import Path
from typing import Dict, Any, Tuple, Union
from series_utils.log_manager import LogManager

logger = LogManager().get_logger("ConfigLoader")


class ConfigLoader:
    """
    Loader for JSON chart options files.

    Failures are reported as (success, config, error_message) tuples rather
    than raised, so callers decide whether a missing file is fatal.
    """

    def load_config_from_path(self, filepath: Union[str, Path]) -> Tuple[bool, Dict[str, Any], str]:
        """
        Load configuration from an absolute or relative path.

        Args:
            filepath: Path to configuration file

        Returns:
            Tuple of (success: bool, config: dict, error_message: str)
            - If successful: (True, config_dict, '')
            - If failed: (False, {}, error_message)
        """
        filepath = Path(filepath)

        if not filepath.exists():
            error_msg = f'Configuration file not found: {filepath}'
            logger.error(error_msg)
            return False, {}, error_msg

        try:
            with open(filepath, 'r') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            error_msg = f'Invalid JSON in {filepath}: {str(e)}'
            logger.error(error_msg)
            return False, {}, error_msg
        except OSError as e:
            error_msg = f'Error loading {filepath}: {str(e)}'
            logger.error(error_msg)
            return False, {}, error_msg

        if not isinstance(config, dict):
            error_msg = f'Expected a JSON object in {filepath}, got {type(config).__name__}'
            logger.error(error_msg)
            return False, {}, error_msg

        logger.info(f"Successfully loaded config from: {filepath}")
        return True, config, ''

    def load_chart_options(self, filepath: Union[str, Path]) -> Tuple[bool, Dict[str, Any], str]:
        """
        Load chart options and check that 'series', when present, is a list.

        Args:
            filepath: Path to the options file

        Returns:
            Tuple of (success: bool, options: dict, error_message: str)
        """
        success, options, error_msg = self.load_config_from_path(filepath)
        if not success:
            return success, options, error_msg

        series = options.get('series')
        if series is not None and not isinstance(series, list):
            error_msg = f"'series' in {filepath} must be a list, got {type(series).__name__}"
            logger.error(error_msg)
            return False, {}, error_msg

        logger.debug(f"Chart options from {filepath} define {len(series or [])} series")
        return True, options, ''
