"""
Configuration for the device-platforms CLI.

Handles:
- Global options set by the app callback
- Output format resolution (global option -> environment -> default)
"""

import os
from typing import Optional

from device_platforms.utils.exceptions import ValidationError


OUTPUT_FORMATS = ('table', 'json', 'names')
DEFAULT_OUTPUT_FORMAT = 'table'
FORMAT_ENV_VAR = 'DEVICE_PLATFORMS_FORMAT'


# ============================================================================
# Global Options (set by CLI callback)
# ============================================================================

class GlobalOptions:
    """Global CLI options storage."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._output_format = None
        return cls._instance

    @property
    def output_format(self) -> Optional[str]:
        return self._output_format

    def set(self, output_format: str = None):
        """Set global options."""
        self._output_format = output_format

    def clear(self):
        """Clear all global options."""
        self._output_format = None


# Singleton instance
GLOBAL_OPTIONS = GlobalOptions()


def _set_global_options(output_format: Optional[str]):
    GLOBAL_OPTIONS.set(output_format=output_format)


def resolve_output_format(explicit: Optional[str] = None) -> str:
    """Pick the output format: explicit value, global option, environment, default."""
    value = explicit or GLOBAL_OPTIONS.output_format or os.environ.get(FORMAT_ENV_VAR)
    if not value:
        return DEFAULT_OUTPUT_FORMAT
    value = value.strip().lower()
    if value not in OUTPUT_FORMATS:
        raise ValidationError(
            f"Invalid output format '{value}' (expected one of: {', '.join(OUTPUT_FORMATS)})"
        )
    return value
