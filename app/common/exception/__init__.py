from app.common.exception.api_exception import ApiException
from app.common.exception.load_test_exception import (
    ValidationError,
    CompileError,
    MissingEndpointError,
    MissingProfileParametersError,
    InvalidProfileError,
    ConfigurationError,
    LaunchError,
    NotFoundError,
)

__all__ = [
    'ApiException',
    'ValidationError',
    'CompileError',
    'MissingEndpointError',
    'MissingProfileParametersError',
    'InvalidProfileError',
    'ConfigurationError',
    'LaunchError',
    'NotFoundError',
]
