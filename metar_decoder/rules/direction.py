"""Compass directions, direction ranges and obscuration directions."""

from metar_decoder.models import DisplayHint
from metar_decoder.rules.common import COMPASS, DIRECTION_NAMES, compile_rules, fixed

OBSCURATION_DIRECTIONS = {
    'G': 'due to Ground/Terrain',
    'N': 'to the North',
    'E': 'to the East',
    'W': 'to the West',
    'S': 'to the South',
    'NE': 'to the Northeast',
    'NW': 'to the Northwest',
    'SE': 'to the Southeast',
    'SW': 'to the Southwest',
    'AL': 'All Around',
}


def decode_direction(match: str) -> str:
    if '-' in match:
        start, end = match.split('-')
        return f'From {DIRECTION_NAMES[start]} to {DIRECTION_NAMES[end]}'
    return DIRECTION_NAMES[match]


def decode_obscuration(match: str) -> str:
    suffix = match[4:]
    direction = OBSCURATION_DIRECTIONS.get(suffix, f'Unknown direction ({suffix})')
    return f'Obscuration {direction}'


# Whole token only: 'CIG 030 N' and 'MOV E' belong to their own rules
RULES = compile_rules([
    (rf'^{COMPASS}(?:-{COMPASS})?$', 'direction', DisplayHint('compass', 'rose'), decode_direction),
    (r'\bALQDS\b', 'all-quads', DisplayHint(None, 'rose'), fixed('In all quadrants')),
    (r'\bOBSC[GNEWSAL]+\b', 'obscured', DisplayHint(None, 'orange'), decode_obscuration),
])
