"""
METAR decoder: turns raw METAR reports into plain-language explanations.
"""

from metar_decoder.decoder import MetarDecoder, annotate, decode_token, translate
from metar_decoder.exceptions import (
    AirportDataError,
    InvalidStationError,
    MetarDecoderError,
    MetarFetchError,
)
from metar_decoder.models import (
    AirportRecord,
    DecodedToken,
    DecodingRule,
    DisplayHint,
    IdentifierLookup,
    MappingLookup,
    MetarRecord,
)
from metar_decoder.rules import RuleLibrary, build_rule_library
from metar_decoder.tokenizer import segment

__version__ = "0.1.0"

__all__ = [
    'MetarDecoder',
    'segment',
    'decode_token',
    'annotate',
    'translate',
    'RuleLibrary',
    'build_rule_library',
    'DisplayHint',
    'DecodingRule',
    'DecodedToken',
    'AirportRecord',
    'IdentifierLookup',
    'MappingLookup',
    'MetarRecord',
    'MetarDecoderError',
    'InvalidStationError',
    'MetarFetchError',
    'AirportDataError',
]
