__version__ = "1.0.0"

from .platforms import (
    Platform,
    PLATFORMS,
    PLATFORM_DEFINITIONS,
    platform_for_id,
    is_known_platform_id,
    platform_for_name,
    is_known_platform_name,
    platforms_for_tag,
    is_known_platform_tag,
    platform_tags,
)
from .query import parse_one, parse_expression, parse_platforms
from .utils.exceptions import (
    PlatformsException,
    UnknownPlatformError,
    UnknownPlatformIdError,
    UnknownPlatformNameError,
    UnknownPlatformTagError,
)

__all__ = [
    '__version__',
    'Platform', 'PLATFORMS', 'PLATFORM_DEFINITIONS',
    'platform_for_id', 'is_known_platform_id',
    'platform_for_name', 'is_known_platform_name',
    'platforms_for_tag', 'is_known_platform_tag',
    'platform_tags',
    'parse_one', 'parse_expression', 'parse_platforms',
    'PlatformsException', 'UnknownPlatformError',
    'UnknownPlatformIdError', 'UnknownPlatformNameError', 'UnknownPlatformTagError',
]
