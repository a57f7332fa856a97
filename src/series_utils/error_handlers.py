"""
Standardized Error Handling for series building.
Provides the exception hierarchy raised while turning rows into chart series
and a structured error payload for callers that report failures per series.
"""

from typing import Dict, Any, List, Optional
from series_utils.log_manager import LogManager

logger = LogManager().get_logger("ErrorHandlers")


class SeriesError(Exception):
    """
    Base exception for series building errors with structured error information.

    Carries a machine-readable code and a details dictionary so callers can
    report the failure without parsing the message.
    """

    def __init__(
        self,
        message: str,
        code: str = 'SERIES_ERROR',
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize series error.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., 'CONFIGURATION_ERROR')
            details: Additional error details dictionary
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(SeriesError):
    """Exception for malformed series definitions or chart options."""

    def __init__(self, message: str, config_errors: Optional[List[str]] = None):
        """
        Initialize configuration error.

        Args:
            message: Main error message
            config_errors: List of specific configuration issues
        """
        super().__init__(
            message=message,
            code='CONFIGURATION_ERROR',
            details={'config_errors': config_errors or []}
        )


class UnsupportedConversion(SeriesError):
    """Exception for a timeType with no registered timestamp converter."""

    def __init__(self, time_type: str):
        super().__init__(
            message=f"No timestamp converter registered for timeType '{time_type}'",
            code='UNSUPPORTED_CONVERSION',
            details={'time_type': time_type}
        )


class ProcessingError(SeriesError):
    """Exception for row values that cannot be converted."""

    def __init__(self, message: str, processing_stage: Optional[str] = None):
        """
        Initialize processing error.

        Args:
            message: Error message
            processing_stage: Stage where processing failed
        """
        details = {}
        if processing_stage:
            details['processing_stage'] = processing_stage

        super().__init__(
            message=message,
            code='PROCESSING_ERROR',
            details=details
        )


def create_error_response(error: Exception, log_error: bool = True) -> Dict[str, Any]:
    """
    Create a standardized error payload from an exception.

    Args:
        error: Exception to convert
        log_error: Whether to log the error (default: True)

    Returns:
        Dictionary with 'success': False and an 'error' block
    """
    if isinstance(error, SeriesError):
        response = {
            'success': False,
            'error': {
                'message': error.message,
                'code': error.code,
                **error.details
            }
        }

        if log_error and isinstance(error, ConfigurationError):
            logger.warning(f"Series Error ({error.code}): {error.message}")
        elif log_error:
            logger.error(f"Series Error ({error.code}): {error.message}")

        return response

    # Generic unexpected error
    error_message = str(error)
    response = {
        'success': False,
        'error': {
            'message': error_message,
            'code': 'INTERNAL_ERROR'
        }
    }

    if log_error:
        logger.error(f"Unexpected error: {error_message}", exc_info=error)

    return response
