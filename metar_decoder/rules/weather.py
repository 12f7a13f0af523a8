"""
Present weather groups: precipitation, thunderstorms and obscurations.

Each phenomenon takes an optional intensity prefix ('-' light, '+' heavy,
none moderate) and, for most of them, an optional vicinity prefix (VC).
Descriptors are handled per phenomenon: SH turns rain into rain showers,
BL turns snow into blowing snow (and drops the intensity word), BC turns
fog into patchy fog.
"""

import re
from typing import Callable

from metar_decoder.models import DisplayHint
from metar_decoder.rules.common import (
    VICINITY_SUFFIX,
    WORD_END,
    WORD_START,
    compile_rules,
    fixed,
    intensity,
    minutes,
)

DROPLET = DisplayHint('droplet', 'blue')
SNOWFLAKE = DisplayHint('snowflake', 'blue')
HAIL = DisplayHint('cloud-hail', 'blue')
TORNADO = DisplayHint('tornado', 'blue')
RAIN_WIND = DisplayHint('cloud-rain-wind', 'blue')
THUNDER = DisplayHint('zap', 'orange')


def weather_group(body: str, vicinity: bool = True) -> str:
    """Pattern for a whole-word weather group with optional prefixes."""
    prefix = r'(VC)?[-+]?' if vicinity else r'[-+]?'
    return WORD_START + prefix + body + WORD_END


def phenomenon(noun: str) -> Callable[[str], str]:
    """Decode function for '[VC][-+]XX' groups: '<Intensity> <noun>[ in the vicinity]'."""

    def decode(match: str) -> str:
        is_vicinity = match.startswith('VC')
        group = match[2:] if is_vicinity else match
        suffix = VICINITY_SUFFIX if is_vicinity else ''
        return f'{intensity(group)}{noun}{suffix}'

    return decode


def decode_rain(match: str) -> str:
    is_vicinity = 'VC' in match
    group = match.replace('VC', '')
    description = f'{intensity(group)}rain'
    if 'SH' in group:
        description += ' showers'
    if is_vicinity:
        description += VICINITY_SUFFIX
    return description


def decode_snow(match: str) -> str:
    is_vicinity = match.startswith('VC')
    group = match[2:] if is_vicinity else match
    suffix = VICINITY_SUFFIX if is_vicinity else ''
    # Blowing snow is reported without an intensity word
    if 'BL' in group:
        return f'Blowing snow{suffix}'
    return f'{intensity(group)}snow{suffix}'


def decode_funnel_cloud(match: str) -> str:
    is_vicinity = match.startswith('VC')
    group = match[2:] if is_vicinity else match
    suffix = VICINITY_SUFFIX if is_vicinity else ''
    if group.startswith('+'):
        return f'Tornado{suffix}'
    return f'{intensity(group)}funnel clouds{suffix}'


def freezing(noun: str) -> Callable[[str], str]:
    def decode(match: str) -> str:
        return f'{intensity(match)}freezing {noun}'

    return decode


PRECIPITATION_RULES = compile_rules([
    (weather_group(r'(SH)?RA'), 'rain', DROPLET, decode_rain),
    (weather_group(r'FZRA', vicinity=False), 'freezing-rain', SNOWFLAKE, freezing('rain')),
    (weather_group(r'FZDZ', vicinity=False), 'freezing-drizzle', SNOWFLAKE, freezing('drizzle')),
    (WORD_START + r'FZFG' + WORD_END, 'freezing-fog', DisplayHint(None, 'slate'), fixed('Freezing fog')),
    (weather_group(r'DZ'), 'drizzle', DROPLET, phenomenon('drizzle')),
    (weather_group(r'GS', vicinity=False), 'snow-pellets', HAIL, phenomenon('snow pellets')),
    (weather_group(r'(BL)?SN'), 'snow', SNOWFLAKE, decode_snow),
    (weather_group(r'IC', vicinity=False), 'ice-crystals', SNOWFLAKE, phenomenon('ice crystals')),
    (weather_group(r'GR', vicinity=False), 'hail', HAIL, phenomenon('hail')),
    (weather_group(r'SG', vicinity=False), 'snow-grain', SNOWFLAKE, phenomenon('snow grains')),
    (weather_group(r'PL'), 'ice-pellets', SNOWFLAKE, phenomenon('ice pellets')),
    (weather_group(r'SQ'), 'squall', DisplayHint('wind', 'blue'), phenomenon('squalls')),
    (weather_group(r'DS'), 'duststorm', TORNADO, phenomenon('duststorm')),
    (weather_group(r'SS'), 'sandstorm', TORNADO, phenomenon('sandstorm')),
    (weather_group(r'PO'), 'sand-whirls', TORNADO, phenomenon('dust/sand whirls')),
    (weather_group(r'FC'), 'funnel-cloud', TORNADO, decode_funnel_cloud),
    (r'\bVIRGA\b', 'virga', DisplayHint('bubbles', 'blue'),
     fixed('Precipitation evaporating before reaching the ground')),
    (r'\bDU\b', 'widespread-dust', TORNADO, fixed('Widespread dust')),
    (r'\bUP\b', 'unknown-precip', RAIN_WIND, fixed('Unknown precipitation')),
    (weather_group(r'SH'), 'showers', RAIN_WIND, phenomenon('shower')),
])


THUNDERSTORM_GROUP = re.compile(r'(VC)?([-+]?)TS(?:([-+]?)RA)?(GR)?')

LOWER_INTENSITY = {'-': 'light ', '+': 'heavy '}


def decode_thunderstorm(match: str) -> str:
    """
    Compose a thunderstorm sentence from the facts present in the group.

    '+TSRAGR' -> 'Heavy thunderstorm with moderate rain and hail'
    """
    parts = THUNDERSTORM_GROUP.fullmatch(match)
    vicinity, storm_sign, rain_sign, hail = parts.groups()
    has_rain = 'RA' in match

    storm = LOWER_INTENSITY.get(storm_sign, '')
    description = f'{storm.capitalize()}thunderstorm' if storm else 'Thunderstorm'
    if has_rain:
        description += f' with {LOWER_INTENSITY.get(rain_sign or "", "moderate ")}rain'
        if hail:
            description += ' and hail'
    elif hail:
        description += ' with hail'
    if vicinity:
        description += VICINITY_SUFFIX
    return description


def thunderstorm_timing(event: str) -> Callable[[str], str]:
    def decode(match: str) -> str:
        return f'Thunderstorm {event} {minutes(match[3:5])} after the hour'

    return decode


def decode_thunderstorm_period(match: str) -> str:
    return (
        f'Thunderstorm began {minutes(match[3:5])} after the hour'
        f' and ended {minutes(match[6:8])} after the hour'
    )


# VCTS must precede the general group, which would also match it
THUNDERSTORM_RULES = compile_rules([
    (r'\bVCTS\b', 'vicinity-thunderstorm', THUNDER, fixed('Thunderstorm in the vicinity')),
    (weather_group(r'TS([-+]?RA)?(GR)?'), 'thunderstorm', THUNDER, decode_thunderstorm),
    (r'\bTSB\d{2}E\d{2}', 'thunderstorm-begin-end', THUNDER, decode_thunderstorm_period),
    (r'\bTSB\d{2}', 'thunderstorm-began', THUNDER, thunderstorm_timing('began')),
    (r'\bTSE\d{2}', 'thunderstorm-end', THUNDER, thunderstorm_timing('ending')),
    (r'\bTSNO\b', 'thunderstorm-no', DisplayHint(None, 'amber'),
     fixed('Thunderstorm information not available')),
])


def decode_fog(match: str) -> str:
    return 'Patchy fog' if 'BC' in match else 'Fog'


OBSCURATION_RULES = compile_rules([
    (r'\bFU\b', 'smoke', DisplayHint(None, 'slate'), fixed('Smoke')),
    (r'\bHZ\b', 'haze', DisplayHint(None, 'violet'), fixed('Haze')),
    (r'\bBR\b', 'mist', DisplayHint(None, 'violet'), fixed('Mist')),
    (WORD_START + r'(BC)?FG' + WORD_END, 'fog', DisplayHint(None, 'slate'), decode_fog),
    (r'\bVA\b', 'volcanic-ash', DisplayHint('cloud-alert', 'red'), fixed('Volcanic ash')),
    (r'\bVISNO\b', 'visibility-no', DisplayHint(None, 'amber'),
     fixed('Visibility at secondary location not available')),
])
