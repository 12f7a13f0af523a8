"""
The ordered rule library.

Rules are tried in library order and the first one that matches and
decodes wins, so a specific group must come before a general one that
would also match it.
"""

from typing import Iterator, List, Optional, Sequence

from metar_decoder.models import DecodingRule, IdentifierLookup
from metar_decoder.rules import (
    direction,
    lightning,
    precipitation,
    pressure,
    remarks,
    sky,
    station,
    temperature,
    visibility,
    weather,
    wind,
)


class RuleLibrary(Sequence[DecodingRule]):
    """Immutable, ordered collection of decoding rules."""

    def __init__(self, rules):
        self._rules = tuple(rules)

    def __getitem__(self, index):
        return self._rules[index]

    def __iter__(self) -> Iterator[DecodingRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleLibrary({len(self._rules)} rules)"

    def categories(self) -> List[str]:
        """Distinct categories in library order."""
        seen = []
        for rule in self._rules:
            if rule.category not in seen:
                seen.append(rule.category)
        return seen


def build_rule_library(lookup: Optional[IdentifierLookup] = None) -> RuleLibrary:
    """
    Assemble the rule library.

    Args:
        lookup: Airport identifier lookup for the station rule. Without one
            every unreserved four-letter group is treated as a station.

    Returns:
        RuleLibrary with the families in priority order
    """
    return RuleLibrary(
        station.build_report_rules(lookup)
        + temperature.RULES
        + station.SENSOR_RULES
        + weather.PRECIPITATION_RULES
        + precipitation.RULES
        + weather.THUNDERSTORM_RULES
        + lightning.RULES
        + weather.OBSCURATION_RULES
        + direction.RULES
        + sky.RULES
        + wind.RULES
        + remarks.MOVEMENT_RULES
        + pressure.RULES
        + remarks.MISC_RULES
        + visibility.RULES
    )


__all__ = ['RuleLibrary', 'build_rule_library']
