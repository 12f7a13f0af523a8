"""Data models for METAR decoding."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, Mapping, Optional, Pattern


@dataclass(frozen=True)
class DisplayHint:
    """
    Presentation metadata attached to a rule.

    Never interpreted by the decoder, only handed to whatever renders
    the annotated report.

    Attributes:
        icon: Icon identifier (e.g. "wind"), or None for text-only rules
        color: Colour tag used for highlighting (e.g. "green")
    """

    icon: Optional[str]
    color: str

    def to_dict(self) -> dict:
        return {'icon': self.icon, 'color': self.color}


@dataclass(frozen=True)
class DecodedToken:
    """
    A token of a report together with its decoding, if any.

    Undecoded tokens (no rule matched) have category, hint and
    explanation set to None.
    """

    token: str
    category: Optional[str] = None
    hint: Optional[DisplayHint] = None
    explanation: Optional[str] = None

    @property
    def decoded(self) -> bool:
        return self.explanation is not None

    @property
    def text(self) -> str:
        """Explanation when decoded, otherwise the literal token."""
        return self.explanation if self.explanation is not None else self.token

    def to_dict(self) -> dict:
        return {
            'token': self.token,
            'category': self.category,
            'hint': self.hint.to_dict() if self.hint else None,
            'explanation': self.explanation,
        }


@dataclass(frozen=True)
class DecodingRule:
    """
    One entry of the rule library.

    The decode function receives the matched substring and returns an
    explanation, or None to signal that the token should not be treated
    as decoded by this rule.

    Attributes:
        pattern: Regular expression source, searched anywhere in the token
        category: Grammar element name (e.g. "wind"); not unique
        hint: Display metadata passed through to the consumer
        decode: Matched substring -> explanation or None
    """

    pattern: str
    category: str
    hint: DisplayHint
    decode: Callable[[str], Optional[str]]
    compiled: Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'compiled', re.compile(self.pattern))

    def apply(self, token: str) -> Optional[DecodedToken]:
        """
        Match this rule against a token.

        Returns:
            DecodedToken, or None if the pattern does not match or the
            decode function declined the match
        """
        match = self.compiled.search(token)
        if not match:
            return None
        explanation = self.decode(match.group(0))
        if explanation is None:
            return None
        return DecodedToken(
            token=token,
            category=self.category,
            hint=self.hint,
            explanation=explanation,
        )


@dataclass(frozen=True)
class AirportRecord:
    """Entry of the airport reference table."""

    icao: str
    name: str
    city: str
    country: str
    iata: str = ""
    information: str = ""


class IdentifierLookup(ABC):
    """
    Point lookups of station identifiers.

    Used by the station-identifier rule to name airports.
    """

    @abstractmethod
    def has(self, icao: str) -> bool:
        """Whether the identifier is known."""
        pass

    @abstractmethod
    def get(self, icao: str) -> Optional[AirportRecord]:
        """Record for the identifier, or None."""
        pass


class MappingLookup(IdentifierLookup):
    """IdentifierLookup over an in-memory mapping of ICAO code to record."""

    def __init__(self, airports: Mapping[str, AirportRecord]):
        self._airports: Dict[str, AirportRecord] = dict(airports)

    def has(self, icao: str) -> bool:
        return icao in self._airports

    def get(self, icao: str) -> Optional[AirportRecord]:
        return self._airports.get(icao)

    def __len__(self) -> int:
        return len(self._airports)


@dataclass
class MetarRecord:
    """
    A report retrieved from a weather data source.

    Attributes:
        icao: Station identifier
        raw_text: Raw report text as transmitted
        report_time: Time of the report, when the source provides it
        source: Data source identifier
    """

    icao: str
    raw_text: str
    report_time: Optional[datetime] = None
    source: str = ""

    def to_dict(self) -> dict:
        return {
            'icao': self.icao,
            'raw_text': self.raw_text,
            'report_time': self.report_time.isoformat() if self.report_time else None,
            'source': self.source,
        }
