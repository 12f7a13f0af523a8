"""Lightning groups: LTG with an optional set of type codes, and its frequency words."""

from metar_decoder.models import DisplayHint
from metar_decoder.rules.common import compile_rules, fixed

LIGHTNING_TYPES = (
    ('CG', 'Cloud-to-Ground'),
    ('CC', 'Cloud-to-Cloud'),
    ('IC', 'Intra-Cloud'),
)


def decode_lightning(match: str) -> str:
    """
    The suffix after LTG is read as a set of two-letter type codes in any order.

    'LTGICCG' -> 'Cloud-to-Ground and Intra-Cloud lightning'
    """
    if match == 'LTG':
        return 'Lightning detected'
    suffix = match[3:]
    codes = {suffix[i:i + 2] for i in range(0, len(suffix), 2)}
    types = [name for code, name in LIGHTNING_TYPES if code in codes]
    if not types:
        return f'Lightning detected ({suffix})'
    if len(types) == 1:
        return f'{types[0]} lightning'
    if len(types) == 2:
        return f'{" and ".join(types)} lightning'
    return f'Lightning detected ({", ".join(types)})'


RULES = compile_rules([
    (r'\bFRQ\b', 'frq-lightning', DisplayHint(None, 'orange'), fixed('Frequent')),
    (r'\bMDT\b', 'moderate', DisplayHint(None, 'orange'), fixed('Moderate')),
    (r'\bLTG\b|LTG(?:CG|CC|IC)+\b', 'lightning', DisplayHint('zap', 'amber'), decode_lightning),
])
