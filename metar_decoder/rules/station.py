"""Station identifier, observation time and report/station status groups."""

import logging
from typing import List, Optional

from metar_decoder.models import DecodingRule, DisplayHint, IdentifierLookup
from metar_decoder.rules.common import compile_rules, fixed, runway_name

logger = logging.getLogger(__name__)

STATION_HINT = DisplayHint('plane', 'blue')

# Weather phenomena and the prefixes that combine with them into
# four-letter groups (VCSH, BCFG, FZRA, TSRA...)
PHENOMENA = (
    'RA', 'DZ', 'SN', 'SG', 'IC', 'PL', 'GR', 'GS', 'UP',
    'BR', 'FG', 'FU', 'VA', 'DU', 'SA', 'HZ', 'PY',
    'PO', 'SQ', 'FC', 'SS', 'DS', 'TS', 'SH',
)
PHENOMENON_PREFIXES = ('VC', 'SH', 'BL', 'BC', 'FZ', 'TS', 'MI', 'DR', 'PR', 'RE')

# Four-letter report and remark vocabulary that is never a station
REPORT_WORDS = (
    'AUTO', 'LAST', 'TSNO', 'OCNL', 'CONS', 'MTNS', 'OBSC', 'DSNT',
    'MOVG', 'THRU', 'ACSL', 'CCSL', 'SCSL', 'BOVC',
    'DATA', 'MISG', 'WIND', 'GUST', 'RAIN', 'SNOW', 'HAIL', 'DUST',
    'FROM', 'INTO', 'OVER', 'NEAR', 'WITH', 'ALSO', 'PRES', 'ALTM',
)

# Descriptor + phenomenon (VCSH, FZRA) and mixed precipitation (RASN, DZRA)
RESERVED_GROUPS = frozenset(
    REPORT_WORDS
    + tuple(prefix + code for prefix in PHENOMENON_PREFIXES for code in PHENOMENA)
    + tuple(first + second for first in PHENOMENA for second in PHENOMENA)
)


def station_pattern(strict: bool) -> str:
    """
    Pattern for a four-letter station identifier.

    With a lookup the table decides what is a station. Without one,
    reserved report groups are excluded so they reach their own rules.
    """
    if strict:
        return r'^[A-Z]{4}$'
    excluded = '|'.join(sorted(RESERVED_GROUPS))
    return rf'^(?!(?:{excluded})$)[A-Z]{{4}}$'


def station_decoder(lookup: Optional[IdentifierLookup]):
    """Decode function for the station-identifier rule."""

    def decode(match: str) -> Optional[str]:
        if lookup is None:
            return f'Airport: {match} (ICAO identifier)'
        if not lookup.has(match):
            logger.debug("Identifier %s not in airport table", match)
            return None
        airport = lookup.get(match)
        if airport:
            return f'Airport: {airport.name} ({match}) - {airport.city}, {airport.country}'
        return f'Airport: {match} (ICAO identifier)'

    return decode


def decode_time(match: str) -> str:
    day, hour, minute = match[0:2], match[2:4], match[4:6]
    return f'Time: Day {day}, {hour}:{minute} UTC (Zulu time)'


def decode_runway(match: str) -> str:
    return runway_name(match[3:5], match[5:6])


def build_report_rules(lookup: Optional[IdentifierLookup] = None) -> List[DecodingRule]:
    """Rules opening the library: station, time and report status."""
    return compile_rules([
        (station_pattern(lookup is not None), 'station', STATION_HINT, station_decoder(lookup)),
        (r'\b\d{6}Z\b', 'time', DisplayHint('clock', 'purple'), decode_time),
        (r'\bRMK\b', 'remarks', DisplayHint('notebook-pen', 'gray'), fixed('Remarks section begins')),
        (r'\$$', 'maintenance', DisplayHint(None, 'slate'),
         fixed('Automated station requires maintenance')),
        (r'\bAUTO\b', 'auto', DisplayHint(None, 'rose'), fixed('Fully automated report')),
        (r'\bNOSIG\b', 'no-change', DisplayHint(None, 'blue'), fixed('No significant change')),
        (r'\bCOR\b', 'correction', DisplayHint('circle-alert', 'amber'),
         fixed('Correction to a previously disseminated observation')),
        (r'\bLAST\b', 'last', DisplayHint('circle-alert', 'orange'),
         fixed('Last observation before a break in coverage')),
        (r'\bNIL\b', 'missing', DisplayHint('circle-alert', 'red'), fixed('Missing report')),
        (r'\bRWY\d{2}[LCR]?\b', 'runway', DisplayHint('plane-landing', 'amber'), decode_runway),
    ])


def decode_discriminator(match: str) -> str:
    if match == 'AO2':
        return 'Automated station with precipitation discriminator'
    return 'Automated station without precipitation discriminator'


SENSOR_RULES = compile_rules([
    (r'\bPWINO\b', 'precip-sensor-no', DisplayHint(None, 'amber'),
     fixed('Precipitation identifier sensor not available')),
    (r'\bPNO\b', 'precip-amount-no', DisplayHint(None, 'sky'),
     fixed('Precipitation amount not available')),
    (r'\bAO[12]\b', 'precip-discriminator', DisplayHint(None, 'indigo'), decode_discriminator),
])
