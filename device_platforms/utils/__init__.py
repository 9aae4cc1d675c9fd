from .exceptions import (
    PlatformsException,
    UnknownPlatformError,
    UnknownPlatformIdError,
    UnknownPlatformNameError,
    UnknownPlatformTagError,
    CLIError,
    ValidationError,
)

__all__ = [
    'PlatformsException',
    'UnknownPlatformError',
    'UnknownPlatformIdError',
    'UnknownPlatformNameError',
    'UnknownPlatformTagError',
    'CLIError',
    'ValidationError',
]
