"""External data sources: airport reference table and live reports."""

from metar_decoder.sources.airports import AirportTable
from metar_decoder.sources.avwx import AvWxMetarSource

__all__ = ['AirportTable', 'AvWxMetarSource']
