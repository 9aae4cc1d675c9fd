from .config import (
    GlobalOptions, GLOBAL_OPTIONS,
    OUTPUT_FORMATS, DEFAULT_OUTPUT_FORMAT, FORMAT_ENV_VAR,
    resolve_output_format,
)
from .app import app, main

__all__ = [
    'GlobalOptions', 'GLOBAL_OPTIONS',
    'OUTPUT_FORMATS', 'DEFAULT_OUTPUT_FORMAT', 'FORMAT_ENV_VAR',
    'resolve_output_format',
    'app', 'main'
]
