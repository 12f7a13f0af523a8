"""
Token dispatch and report translation.

The decoder never raises for text input: a token no rule recognises is
carried through as literal text.
"""

import logging
from typing import List, Optional

from metar_decoder.models import DecodedToken, IdentifierLookup
from metar_decoder.rules import RuleLibrary, build_rule_library
from metar_decoder.tokenizer import segment

logger = logging.getLogger(__name__)

SENTENCE_SEPARATOR = '. '


def decode_token(token: str, library: RuleLibrary) -> Optional[DecodedToken]:
    """
    Decode a single token with the first rule that accepts it.

    A rule whose decode function returns None is skipped and the search
    continues with the next rule.

    Returns:
        DecodedToken, or None if no rule recognises the token
    """
    for rule in library:
        decoded = rule.apply(token)
        if decoded is not None:
            return decoded
    logger.debug("No rule for token %r", token)
    return None


def annotate(raw_text: str, library: RuleLibrary) -> List[DecodedToken]:
    """
    Decode every token of a report.

    Returns one entry per token in report order. Unrecognised tokens are
    returned with no category, hint or explanation.
    """
    annotated = []
    for token in segment(raw_text):
        decoded = decode_token(token, library)
        annotated.append(decoded if decoded is not None else DecodedToken(token=token))
    return annotated


def translate(raw_text: str, library: RuleLibrary) -> str:
    """
    Plain-language translation of a report.

    Each token becomes one sentence fragment (its explanation, or the
    token itself when unrecognised), joined with '. ' and terminated by
    a period. Empty input gives '.'.
    """
    parts = [decoded.text for decoded in annotate(raw_text, library)]
    return SENTENCE_SEPARATOR.join(parts) + '.'


class MetarDecoder:
    """
    Rule library bundled with the decoding operations.

    Example:
        decoder = MetarDecoder.with_lookup(AirportTable.from_csv('airports.csv'))
        print(decoder.translate('KBOS 121651Z 24016G25KT 10SM FEW250 22/12 A3012'))
    """

    def __init__(self, library: Optional[RuleLibrary] = None):
        self.library = library if library is not None else build_rule_library()

    @classmethod
    def with_lookup(cls, lookup: Optional[IdentifierLookup]) -> 'MetarDecoder':
        """Decoder whose station rule names airports from the lookup."""
        return cls(build_rule_library(lookup))

    def segment(self, raw_text: str) -> List[str]:
        return segment(raw_text)

    def decode_token(self, token: str) -> Optional[DecodedToken]:
        return decode_token(token, self.library)

    def annotate(self, raw_text: str) -> List[DecodedToken]:
        return annotate(raw_text, self.library)

    def translate(self, raw_text: str) -> str:
        return translate(raw_text, self.library)
