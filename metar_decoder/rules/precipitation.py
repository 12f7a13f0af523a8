"""Precipitation amounts and begin/end times from the remarks section."""

from typing import Callable

from metar_decoder.models import DisplayHint
from metar_decoder.rules.common import WORD_END, WORD_START, compile_rules, minutes

RATE_HINT = DisplayHint('droplet', 'lime')
AMOUNT_HINT = DisplayHint('droplet', 'blue')
TIMING_HINT = DisplayHint('cloud-rain-wind', 'blue')


def decode_hourly(match: str) -> str:
    return f'Hourly Precipitation Rate: {int(match[1:5]) / 100:.2f} inches'


def decode_three_hour(match: str) -> str:
    if match == '6////':
        return '3-hour precipitation amount: Missing or unavailable data'
    return f'3-hour precipitation amount: {int(match[1:5]) / 100:.3f} inches'


def decode_daily(match: str) -> str:
    return f'24-hour precipitation amount: {int(match[1:5]) / 100:.2f} inches'


def decode_snow_depth(match: str) -> str:
    depth = int(match[2:5])
    unit = 'inch' if depth == 1 else 'inches'
    return f'Snow depth: {depth} {unit}'


def began_and_ended(noun: str) -> Callable[[str], str]:
    """Decode 'XXBmmEmm'."""

    def decode(match: str) -> str:
        return (
            f'{noun} began {minutes(match[3:5])} after the hour'
            f' and ended {minutes(match[6:8])} after the hour'
        )

    return decode


def event_at(noun: str, event: str) -> Callable[[str], str]:
    """Decode 'XXBmm' or 'XXEmm'."""

    def decode(match: str) -> str:
        return f'{noun} {event} {minutes(match[3:5])} after the hour'

    return decode


RULES = compile_rules([
    # Amounts
    (r'\bP\d{4}\b', 'precip-rate', RATE_HINT, decode_hourly),
    (WORD_START + r'6(?:\d{4}|/{4})' + WORD_END, 'precip-3hr', AMOUNT_HINT, decode_three_hour),
    (WORD_START + r'7\d{4}' + WORD_END, 'precip-24hr', AMOUNT_HINT, decode_daily),
    (WORD_START + r'4/\d{3}' + WORD_END, 'snow-depth', DisplayHint('snowflake', 'blue'), decode_snow_depth),

    # Timing, begin-and-end before begin alone
    (r'\bRAB\d{2}E\d{2}\b', 'rain-begin-end', TIMING_HINT, began_and_ended('Rain')),
    (r'\bRAB\d{2}(?!\d)', 'rain-begin', TIMING_HINT, event_at('Rain', 'began')),
    (r'\bRAE\d{2}(?!\d)', 'rain-end', TIMING_HINT, event_at('Rain', 'ending')),
    (r'\bDZB\d{2}(?!\d)', 'drizzle-begin', TIMING_HINT, event_at('Drizzle', 'began')),
    (r'\bDZE\d{2}(?!\d)', 'drizzle-end', TIMING_HINT, event_at('Drizzle', 'ending')),
    (r'\bSNB\d{2}(?!\d)', 'snow-begin', TIMING_HINT, event_at('Snow', 'began')),
    (r'\bSNE\d{2}(?!\d)', 'snow-end', TIMING_HINT, event_at('Snow', 'ending')),
])
