"""Wind groups: surface wind, variable direction, peak wind and wind shifts."""

from metar_decoder.models import DisplayHint
from metar_decoder.rules.common import compile_rules, fixed

WIND = DisplayHint('wind', 'green')
WIND_TEXT = DisplayHint(None, 'cyan')


def time_of_event(field: str) -> str:
    """Two digits are minutes past the hour, four digits are HHMM."""
    if len(field) == 2:
        return f'{field} minutes past the hour'
    return f'{field[0:2]}:{field[2:4]} UTC'


def decode_wind(match: str) -> str:
    """
    dddssKT, dddssGggKT, VRBssKT or VRBssGggKT.

    Fields are fixed width: direction 0:3, speed 3:5, gust 6:8.
    """
    direction, speed = match[0:3], int(match[3:5])
    if direction == 'VRB':
        description = f'Wind: variable at {speed} knots'
    elif direction == '000' and speed == 0:
        return 'Wind: calm'
    else:
        description = f'Wind: {direction}° at {speed} knots'
    if match[5] == 'G':
        description += f', gusting to {int(match[6:8])} knots'
    return description


def decode_variable_direction(match: str) -> str:
    return f'Winds varying from {match[0:3]}° to {match[4:7]}°'


def decode_peak_wind(match: str) -> str:
    # PK WND dddss/tt or PK WND dddss/hhmm
    wind, when = match.split(' ')[2].split('/')
    return (
        f'Peak wind from {wind[0:3]}° at {int(wind[3:5])} knots,'
        f' occurring at {time_of_event(when)}'
    )


def decode_wind_shift(match: str) -> str:
    return f'Wind shift at {time_of_event(match[6:])}'


RULES = compile_rules([
    (r'\b(?:\d{5}|\d{5}G\d{2}|VRB\d{2}|VRB\d{2}G\d{2})KT\b', 'wind', WIND, decode_wind),
    (r'\b\d{3}V\d{3}\b', 'wind-dir', DisplayHint('gauge', 'orange'), decode_variable_direction),
    (r'\bPK WND \d{5}/(?:\d{4}|\d{2})\b', 'peak-wind-full', WIND, decode_peak_wind),
    (r'\bPK WND\b', 'peak-wind', WIND, fixed('Peak wind')),
    (r'\bWND\b', 'wind-word', WIND_TEXT, fixed('Wind')),
    (r'\bWSHFT (?:\d{4}|\d{2})\b', 'wind-shift', WIND, decode_wind_shift),
    (r'\bWSHFT\b', 'wind-shift-word', WIND, fixed('Wind shift')),
    (r'\bFROPA\b', 'frontal-passage', WIND_TEXT, fixed('Frontal passage')),
    (r'\bPK\b', 'peak', WIND_TEXT, fixed('Peak')),
])
