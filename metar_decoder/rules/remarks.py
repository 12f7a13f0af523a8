"""Plain remark words: movement, proximity, frequency and report type."""

from metar_decoder.models import DisplayHint
from metar_decoder.rules.common import COMPASS, DIRECTION_NAMES, compile_rules, fixed

EMERALD = DisplayHint(None, 'emerald')
ORANGE = DisplayHint(None, 'orange')
GRAY = DisplayHint(None, 'gray')


def decode_movement(match: str) -> str:
    direction = match.split(' ')[1]
    return f'Moving toward the {DIRECTION_NAMES[direction]}'


MOVEMENT_RULES = compile_rules([
    (r'\bMOV LTL\b', 'moving-little', EMERALD, fixed('Moving little')),
    (rf'\bMOVG? {COMPASS}\b', 'moving-direction', EMERALD, decode_movement),
    (r'\bMOV\b', 'moving', EMERALD, fixed('Moving')),
    (r'\bMOVG\b', 'movg', EMERALD, fixed('Moving')),
    (r'\bSTNRY\b', 'stationary', ORANGE, fixed('Stationary')),
    (r'\bALF\b', 'aloft', ORANGE, fixed('Aloft')),
    (r'\bVC\b', 'vicinity', ORANGE, fixed('In the vicinity')),
    (r'\bDSNT\b', 'distant', ORANGE, fixed('Distant')),
    (r'\bDSIPTD\b', 'dissipated', ORANGE, fixed('Dissipated')),
    (r'\bV\b', 'variable', ORANGE, fixed('Variable')),
    (r'\bOHD\b', 'overhead', DisplayHint(None, 'pink'), fixed('Overhead')),

    # Frequency and duration
    (r'\bOCNL\b', 'occasional', DisplayHint(None, 'green'), fixed('Occasional')),
    (r'\bCONS\b', 'continuous', EMERALD, fixed('Continuous')),
])


MISC_RULES = compile_rules([
    (r'\bMETAR\b', 'metar', GRAY, fixed('METAR')),
    (r'\bBNK\b', 'bank', DisplayHint(None, 'stone'), fixed('Bank')),
    (r'\bLGT\b', 'light', DisplayHint(None, 'lime'), fixed('Light')),
    (r'\bMTNS\b', 'mountains', DisplayHint(None, 'blue'), fixed('Mountains')),
    (r'\bAND\b', 'and', GRAY, fixed('And')),
    (r'\bTHRU\b', 'thru', GRAY, fixed('Through')),
    (r'\bSPECI\b', 'special', DisplayHint('circle-alert', 'orange'), fixed('Special report')),
])
