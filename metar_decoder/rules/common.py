"""Phrase tables and helpers shared by the rule families."""

from typing import Callable, Iterable, List, Optional, Tuple

from metar_decoder.models import DecodingRule, DisplayHint

# Bounds a group to a whole whitespace-delimited word
WORD_START = r'(?:^|(?<=\s))'
WORD_END = r'(?=\s|$)'

COMPASS = r'(?:NE|NW|SE|SW|N|E|S|W)'

DIRECTION_NAMES = {
    'N': 'North',
    'NE': 'Northeast',
    'E': 'East',
    'SE': 'Southeast',
    'S': 'South',
    'SW': 'Southwest',
    'W': 'West',
    'NW': 'Northwest',
}

RUNWAY_SIDES = {
    'L': ' Left',
    'C': ' Center',
    'R': ' Right',
}

INTENSITY_WORDS = {
    '-': 'Light ',
    '+': 'Heavy ',
}

VICINITY_SUFFIX = ' in the vicinity'

# Format: (pattern, category, hint, decode)
RuleEntry = Tuple[str, str, DisplayHint, Callable[[str], Optional[str]]]


def compile_rules(table: Iterable[RuleEntry]) -> List[DecodingRule]:
    """Turn a table of rule tuples into DecodingRule objects, keeping order."""
    return [
        DecodingRule(pattern=pattern, category=category, hint=hint, decode=decode)
        for pattern, category, hint, decode in table
    ]


def fixed(phrase: str) -> Callable[[str], str]:
    """Decode function for groups that always mean the same thing."""
    return lambda match: phrase


def intensity(group: str) -> str:
    """Intensity word for a group starting with an optional '-' or '+'."""
    return INTENSITY_WORDS.get(group[:1], 'Moderate ')


def minutes(value: str) -> str:
    """'1 minute' or 'N minutes' for a two-digit minute field."""
    count = int(value)
    return '1 minute' if count == 1 else f'{count} minutes'


def tenths(sign_digit: str, digits: str) -> float:
    """
    Decode a tenths-of-a-degree field with a leading sign digit.

    '0' is positive, anything else negative. Negative zero is folded to 0.0.
    """
    value = int(digits) / 10
    if sign_digit != '0':
        value = -value
    return value + 0.0


def feet(hundreds: str) -> str:
    """Three-digit hundreds-of-feet field as a thousands-separated number."""
    return f'{int(hundreds) * 100:,}'


def runway_name(number: str, side: str = '') -> str:
    return f'Runway {number}{RUNWAY_SIDES.get(side, "")}'
