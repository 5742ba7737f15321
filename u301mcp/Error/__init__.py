from .u301_error import (
    U301Error,
    InputValidationError,
    TooManyItemsError,
    EmptyBatchError,
    U301ApiError,
    TransportError,
    EmptyResponseError,
    UnexpectedResponseError,
    ConfigurationError,
)

__all__ = [
    'U301Error', 'InputValidationError', 'TooManyItemsError', 'EmptyBatchError',
    'U301ApiError', 'TransportError', 'EmptyResponseError',
    'UnexpectedResponseError', 'ConfigurationError',
]
