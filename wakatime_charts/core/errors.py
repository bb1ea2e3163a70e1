"""Exception hierarchy for chart generation."""


class ChartError(Exception):
    """Base exception for chart generation errors."""
    pass


class ConfigurationError(ChartError):
    """Measurements or chart configuration are invalid."""
    pass


class StatsFetchError(ChartError):
    """The stats API request failed or returned an unusable payload."""
    pass


class ColorTableError(ChartError):
    """The color lookup table could not be read."""
    pass
