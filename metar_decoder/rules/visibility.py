"""Prevailing visibility and runway visual range."""

import re

from metar_decoder.models import DisplayHint
from metar_decoder.rules.common import WORD_END, WORD_START, compile_rules, fixed, runway_name

EYE = DisplayHint('eye', 'yellow')

BOUNDS = {
    'P': 'more than ',
    'M': 'less than ',
}

RUNWAY_RANGE = re.compile(r'R(\d{2})([LCR]?)/([MP]?)(\d{4})(?:V([MP]?)(\d{4}))?FT')


def decode_visibility(match: str) -> str:
    """'10SM', '1 1/2SM', '3/4SM', 'P6SM' or 'M1/4SM'."""
    bound = BOUNDS.get(match[0], '')
    value = match[1:-2] if bound else match[:-2]
    return f'Visibility: {bound}{value} statute miles'


def decode_runway_range(match: str) -> str:
    """
    'R28L/2400V6000FT' -> 'Runway 28 Left: 2400-6000ft visibility'

    A range is printed as measured; a single distance keeps its P or M bound.
    """
    number, side, bound, low, _, high = RUNWAY_RANGE.fullmatch(match).groups()
    if high:
        distance = f'{int(low)}-{int(high)}'
    else:
        distance = f'{BOUNDS.get(bound, "")}{int(low)}'
    return f'{runway_name(number, side)}: {distance}ft visibility'


RULES = compile_rules([
    (WORD_START + r'[PM]?(?:\d+ )?\d+(?:/\d+)?SM' + WORD_END, 'visibility', EYE, decode_visibility),
    (r'\bVIS\b', 'visibility-word', DisplayHint(None, 'yellow'), fixed('Visibility')),
    (r'\bR\d{2}[LCR]?/[MP]?\d{4}(?:V[MP]?\d{4})?FT\b', 'runway-visual-range', EYE, decode_runway_range),
])
