from __future__ import annotations


class ZoomConfigError(ValueError):
    """Raised for invalid data-zoom or axis options."""


class SeriesDataError(ValueError):
    """Raised when series input cannot be coerced into numeric columns."""
