"""Exceptions raised by the data sources.

The decoding core never raises: unknown tokens pass through as text.
"""


class MetarDecoderError(Exception):
    """Base class for errors raised by this package."""


class InvalidStationError(MetarDecoderError, ValueError):
    """Station identifier is not four letters."""


class MetarFetchError(MetarDecoderError):
    """Report could not be retrieved from the weather data source."""


class AirportDataError(MetarDecoderError):
    """Airport reference table could not be loaded."""
