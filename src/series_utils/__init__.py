# Logging
from .log_manager import LogManager

# Data sanitization utilities
from .data_sanitization import sanitize_nan_values, sanitize_for_json

# Configuration loading utilities
from .config_loader import ConfigLoader

# Error handling utilities
from .error_handlers import (
    SeriesError,
    ConfigurationError,
    UnsupportedConversion,
    ProcessingError,
    create_error_response
)

__all__ = [
    # Logging
    'LogManager',

    # Data sanitization
    'sanitize_nan_values',
    'sanitize_for_json',

    # Config loading
    'ConfigLoader',

    # Error handling
    'SeriesError',
    'ConfigurationError',
    'UnsupportedConversion',
    'ProcessingError',
    'create_error_response'
]
