"""
Segmentation of a raw report into tokens.

A plain whitespace split would break groups that span several words
('PK WND 28015/25', 'CIG 030 N', '1 1/2SM'). Those groups are first
swapped for placeholders, the text is split, and the placeholders are
restored.
"""

import re
from typing import List

from metar_decoder.rules.common import COMPASS, WORD_END, WORD_START

# Most specific first: a group consumed by an earlier pattern is no
# longer visible to the later ones
MULTI_WORD_GROUPS = [
    re.compile(WORD_START + pattern + WORD_END)
    for pattern in (
        r'CIG\s+\d{3}V\d{3}',
        rf'CIG\s+\d{{3}}\s+{COMPASS}',
        r'CIG\s+\d{3}',
        r'PK\s+WND\s+\d{5}/(?:\d{4}|\d{2})',
        r'PK\s+WND',
        r'WSHFT\s+(?:\d{4}|\d{2})',
        r'MOV\s+LTL',
        rf'MOVG?\s+{COMPASS}',
        r'[PM]?\d\s+\d/\d{1,2}SM',
    )
]

# NUL never occurs in report text and no rule matches it
PLACEHOLDER = re.compile(r'\x00(\d+)\x00')


def segment(raw_text: str) -> List[str]:
    """
    Split a raw report into tokens, keeping multi-word groups whole.

    Internal whitespace of a multi-word group is normalised to single
    spaces. Empty or blank input gives an empty list.
    """
    phrases: List[str] = []

    def hold(match: re.Match) -> str:
        phrases.append(' '.join(match.group(0).split()))
        return f'\x00{len(phrases) - 1}\x00'

    text = raw_text.replace('\x00', ' ')
    for pattern in MULTI_WORD_GROUPS:
        text = pattern.sub(hold, text)

    return [
        PLACEHOLDER.sub(lambda m: phrases[int(m.group(1))], token)
        for token in text.split()
    ]
