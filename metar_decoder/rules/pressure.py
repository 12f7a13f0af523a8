"""Pressure groups: altimeter setting, sea-level pressure and tendency."""

from metar_decoder.models import DisplayHint
from metar_decoder.rules.common import WORD_END, WORD_START, compile_rules, fixed

STANDARD_PRESSURE_HPA = 1013.2

TENDENCIES = {
    '0': 'increasing, then decreasing',
    '1': 'increasing more slowly',
    '2': 'increasing',
    '3': 'increasing then steady',
    '4': 'steady',
    '5': 'decreasing then increasing',
    '6': 'decreasing more slowly',
    '7': 'decreasing',
    '8': 'decreasing then steady',
}


def decode_altimeter(match: str) -> str:
    return f'Altimeter: {int(match[1:5]) / 100:.2f} inHg'


def decode_tendency(match: str) -> str:
    change = int(match[2:5]) / 10
    return f'Pressure {TENDENCIES[match[1]]}, Δ{change:.1f} hPa in past 3 hours'


def sea_level_pressure(digits: str) -> float:
    """
    Expand the three coded digits (tens, units, tenths of hPa).

    The leading 9 or 10 is dropped in the report; the candidate closer to
    standard pressure wins, 132 -> 1013.2, 987 -> 998.7.
    """
    partial = int(digits) / 10
    low = 900 + partial
    high = 1000 + partial
    if abs(low - STANDARD_PRESSURE_HPA) < abs(high - STANDARD_PRESSURE_HPA):
        return low
    return high


def decode_sea_level(match: str) -> str:
    if match == 'SLPNO':
        return 'Sea-level pressure not available'
    return f'Sea-level pressure: {sea_level_pressure(match[3:6]):.1f} hPa'


RULES = compile_rules([
    (r'\bA\d{4}\b', 'altimeter', DisplayHint('gauge', 'orange'), decode_altimeter),
    (WORD_START + r'5[0-8]\d{3}' + WORD_END, 'pressure', DisplayHint('gauge', 'slate'), decode_tendency),
    (r'\bSLP(?:\d{3}|NO)\b', 'slp', DisplayHint('waves', 'teal'), decode_sea_level),
    (r'\bPRESRR\b', 'pressure-rapid', DisplayHint('circle-gauge', 'orange'), fixed('Pressure rising rapidly')),
    (r'\bPRESFR\b', 'pressure-rapid', DisplayHint('circle-gauge', 'orange'), fixed('Pressure falling rapidly')),
])
