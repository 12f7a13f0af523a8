"""Sky condition: cloud layers, ceilings and cloud types."""

from metar_decoder.models import DisplayHint
from metar_decoder.rules.common import COMPASS, DIRECTION_NAMES, compile_rules, feet, fixed

CLOUD = DisplayHint('cloud', 'sky')
SKY_TEXT = DisplayHint(None, 'sky')

COVERAGE = {
    'FEW': 'Few clouds',
    'SCT': 'Scattered clouds',
    'BKN': 'Broken clouds',
    'OVC': 'Overcast',
}


def decode_layer(match: str) -> str:
    if match == 'CLR':
        return 'Clear skies, no clouds'
    return f'{COVERAGE[match[:3]]} at {feet(match[3:6])} feet'


def decode_vertical_visibility(match: str) -> str:
    return f'Vertical visibility: {feet(match[2:5])} feet'


def decode_variable_ceiling(match: str) -> str:
    low, high = match[4:7], match[8:11]
    return f'Variable ceiling between {feet(low)} and {feet(high)} feet'


def decode_ceiling_direction(match: str) -> str:
    _, altitude, direction = match.split(' ')
    return f'Ceiling at {feet(altitude)} feet to the {DIRECTION_NAMES[direction]}'


def decode_ceiling_altitude(match: str) -> str:
    return f'Ceiling at {feet(match[4:7])} feet'


# Ceiling rules run from most to least specific: range, altitude with
# direction, altitude alone, bare CIG
RULES = compile_rules([
    (r'\b(?:(?:FEW|SCT|BKN|OVC)\d{3}|CLR\b)', 'clouds', DisplayHint('cloud-snow', 'cyan'), decode_layer),
    (r'\bSKC\b', 'clouds', DisplayHint('cloud-snow', 'cyan'), fixed('Sky clear')),
    (r'\bVV\d{3}\b', 'vertical-visibility', DisplayHint('eye', 'cyan'), decode_vertical_visibility),
    (r'\bCB\b', 'cumulonimbus', CLOUD, fixed('Cumulonimbus clouds')),
    (r'\bCU\b', 'cumulus', CLOUD, fixed('Cumulus clouds')),
    (r'\bCIG \d{3}V\d{3}\b', 'ceiling-variable', CLOUD, decode_variable_ceiling),
    (rf'\bCIG \d{{3}} {COMPASS}\b', 'ceiling-alt-dir', CLOUD, decode_ceiling_direction),
    (r'\bCIG \d{3}\b', 'ceiling-alt', CLOUD, decode_ceiling_altitude),
    (r'\bCIG\b', 'ceiling', CLOUD, fixed('Ceiling')),
    (r'\bTCU\b', 'towering-cumulus', CLOUD, fixed('Towering cumulus clouds')),
    (r'\bACSL\b', 'altocumulus', CLOUD, fixed('Altocumulus standing lenticular clouds')),
    (r'\bACC\b', 'altocumulus-castellanus', CLOUD, fixed('Altocumulus castellanus clouds')),
    (r'\bCCSL\b', 'cirrocumulus-lenticular', CLOUD, fixed('Cirrocumulus standing lenticular clouds')),
    (r'\bCBMAM\b', 'cumulonimbus-mammatus', CLOUD, fixed('Cumulonimbus mammatus clouds')),
    (r'\bSCSL\b', 'stratocumulus-lenticular', CLOUD, fixed('Stratocumulus standing lenticular clouds')),
    (r'\bBINOVC\b', 'breaks-in-overcast', SKY_TEXT, fixed('Breaks in overcast')),
    (r'\bBOVC\b', 'base-of-overcast', SKY_TEXT, fixed('Base of overcast')),
    (r'\bCHINO\b', 'chino', SKY_TEXT, fixed('Sky conditions at secondary location not available')),
    (r'\bFEW\b', 'few', CLOUD, fixed('Few clouds')),
    (r'\bBKN\b', 'broken', SKY_TEXT, fixed('Broken clouds')),
    (r'\bSCT\b', 'scattered', CLOUD, fixed('Scattered clouds')),
    (r'\bOVC\b', 'overcast', CLOUD, fixed('Overcast')),
])
