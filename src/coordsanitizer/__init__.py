"""
coordsanitizer: Normalize free-form astronomical coordinates.

Quick start::

    from coordsanitizer import CoordinateSanitizer

    sanitizer = CoordinateSanitizer()
    sanitizer.sanitize("12h 34m 56.78s, +12° 34' 56.78\\"").coordinates
    # '12 34 56.780, +12 34 56.780'

    sanitizer.sanitize("M31").coordinates      # object names pass through
    # 'M31'

    # Decimal output
    CoordinateSanitizer(output_format="decimal", precision=4).sanitize("12:30:00, -45:30:00")

    # Whole catalogs
    results = coordsanitizer.sanitize_many(df["position"])
"""
__version__ = "1.0.1"

from coordsanitizer.api import (  # noqa: F401
    CoordinateSanitizer, create_preset, sanitize, sanitize_file, sanitize_many,
    supported_formats,
)
from coordsanitizer.config import PRESETS, OutputFormat, SanitizerConfig  # noqa: F401
from coordsanitizer.result import (  # noqa: F401
    AxisComponent, ErrorKind, InputFormat, SanitizationResult, SourceFormat,
)
