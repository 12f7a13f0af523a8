"""Temperature and dewpoint groups, body and remarks."""

from metar_decoder.models import DisplayHint
from metar_decoder.rules.common import WORD_END, WORD_START, compile_rules, tenths

THERMOMETER_RED = DisplayHint('thermometer', 'red')
THERMOMETER_BLUE = DisplayHint('thermometer', 'blue')


def whole_degrees(field: str) -> int:
    """'M05' -> -5, '12' -> 12."""
    if field.startswith('M'):
        return -int(field[1:])
    return int(field)


def decode_temperature(match: str) -> str:
    temp, dew = match.split('/')
    return f'Temperature: {whole_degrees(temp)}°C, Dewpoint: {whole_degrees(dew)}°C'


def decode_precise(match: str) -> str:
    # T + sign digit and 3 digits for temperature, same for dewpoint
    temp = tenths(match[1], match[2:5])
    dew = tenths(match[5], match[6:9])
    return f'Precise temperature: {temp:.1f}°C, Dewpoint: {dew:.1f}°C'


def decode_six_hour_max(match: str) -> str:
    return f'6-hour maximum temperature: {tenths(match[1], match[2:5]):.1f}°C'


def decode_six_hour_min(match: str) -> str:
    return f'6-hour minimum temperature: {tenths(match[1], match[2:5]):.1f}°C'


def decode_daily_extremes(match: str) -> str:
    maximum = tenths(match[1], match[2:5])
    minimum = tenths(match[5], match[6:9])
    return f'24-hour temperature: Maximum {maximum:.1f}°C, Minimum {minimum:.1f}°C'


RULES = compile_rules([
    (r'\bM?\d{2}/M?\d{2}\b', 'temperature', THERMOMETER_RED, decode_temperature),
    (r'\bT[01]\d{3}[01]\d{3}\b', 'precise-temp', DisplayHint('thermometer', 'fuchsia'), decode_precise),
    (WORD_START + r'1[01]\d{3}' + WORD_END, '6hr-max-temp', THERMOMETER_RED, decode_six_hour_max),
    (WORD_START + r'2[01]\d{3}' + WORD_END, '6hr-min-temp', THERMOMETER_BLUE, decode_six_hour_min),
    (WORD_START + r'4[01]\d{3}[01]\d{3}' + WORD_END, '24hr-min-max-temp', THERMOMETER_BLUE,
     decode_daily_extremes),
])
