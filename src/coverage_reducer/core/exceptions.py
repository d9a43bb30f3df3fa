"""
Coverage Reducer Custom Exception Classes

This module defines all custom exception classes for better error handling
and more informative error messages.

Note that "no matching sample" is not an error anywhere in this package:
reducers return ``None`` and batch operations simply omit the feature.
"""

from typing import Optional, Sequence

# ============================================================================
# Base Exception
# ============================================================================

class CoverageReducerError(Exception):
    """Base exception class for all Coverage Reducer related errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        full_message = f"{message}\nDetails: {details}" if details else message
        super().__init__(full_message)

# ============================================================================
# Input Contract Errors
# ============================================================================

class CoordinateError(CoverageReducerError):
    """Coordinate axis related errors."""

    def __init__(self, coord_name: str, issue: str):
        super().__init__(f"Coordinate error in '{coord_name}': {issue}")
        self.coord_name = coord_name

class ParameterError(CoverageReducerError):
    """Parameter validation errors."""

    def __init__(self, parameter: str, value: str, reason: str):
        super().__init__(f"Invalid parameter '{parameter}': {value}", reason)
        self.parameter = parameter
        self.value = value

class UnsupportedFeatureError(CoverageReducerError):
    """A feature variant that cannot be reduced to a point."""

    def __init__(self, feature_type: str, operation: str):
        super().__init__(
            f"Cannot perform {operation} on feature of type {feature_type}"
        )
        self.feature_type = feature_type
        self.operation = operation

# ============================================================================
# Data Availability Errors
# ============================================================================

class VariableNotFoundError(CoverageReducerError):
    """Variables not found."""

    def __init__(self, missing_variables: Sequence[str], available_variables: Optional[Sequence[str]] = None):
        vars_str = ", ".join(missing_variables)
        super().__init__(
            f"Variables not found: {vars_str}",
            f"Available variables: {', '.join(sorted(available_variables))}" if available_variables else None
        )
        self.missing_variables = list(missing_variables)
        self.available_variables = list(available_variables) if available_variables else None

class DataReadingError(CoverageReducerError):
    """Failure while reading features from the underlying store."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to read features from {source}", reason)
        self.source = source

# ============================================================================
# Processing Errors
# ============================================================================

class DataProcessingError(CoverageReducerError):
    """Data processing related errors."""

    def __init__(self, operation: str, reason: str):
        super().__init__(f"Data processing failed during {operation}", reason)
        self.operation = operation

# ============================================================================
# Utility Functions
# ============================================================================

def check_variables_availability(requested: Sequence[str], available: Sequence[str]) -> None:
    """Check if all requested variables are available."""
    missing = [v for v in requested if v not in available]
    if missing:
        raise VariableNotFoundError(missing, available)
