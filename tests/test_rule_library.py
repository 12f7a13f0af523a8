"""Tests for rule library assembly and ordering."""

import pytest

from metar_decoder.models import DecodingRule, DisplayHint
from metar_decoder.rules import RuleLibrary, build_rule_library

# One token per rule, in library order, that the rule decodes first
EXAMPLES = [
    # Report and station status
    'KBOS', '121651Z', 'RMK', '$', 'AUTO', 'NOSIG', 'COR', 'LAST', 'NIL', 'RWY28L',
    # Temperature
    '22/12', 'T02220122', '10142', '21012', '401120084',
    # Sensor status
    'PWINO', 'PNO', 'AO2',
    # Weather phenomena
    '+SHRA', '-FZRA', 'FZDZ', 'FZFG', 'DZ', 'GS', 'BLSN', 'IC', 'GR', 'SG',
    'PL', 'SQ', 'DS', 'SS', 'PO', '+FC', 'VIRGA', 'DU', 'UP', 'VCSH',
    # Precipitation amounts and timing
    'P0012', '60217', '70125', '4/001', 'RAB15E30', 'RAB15', 'RAE30',
    'DZB10', 'DZE10', 'SNB05', 'SNE30',
    # Thunderstorm
    'VCTS', '+TSRA', 'TSB05E30', 'TSB05', 'TSE45', 'TSNO',
    # Lightning
    'FRQ', 'MDT', 'LTGICCG',
    # Obscuration
    'FU', 'HZ', 'BR', 'BCFG', 'VA', 'VISNO',
    # Direction
    'NE-SE', 'ALQDS', 'OBSCG',
    # Sky
    'FEW250', 'SKC', 'VV002', 'CB', 'CU', 'CIG 030V040', 'CIG 030 N', 'CIG 005',
    'CIG', 'TCU', 'ACSL', 'ACC', 'CCSL', 'CBMAM', 'SCSL', 'BINOVC', 'BOVC',
    'CHINO', 'FEW', 'BKN', 'SCT', 'OVC',
    # Wind
    '24016G25KT', '180V240', 'PK WND 28045/15', 'PK WND', 'WND', 'WSHFT 1715',
    'WSHFT', 'FROPA', 'PK',
    # Movement and frequency
    'MOV LTL', 'MOV E', 'MOV', 'MOVG', 'STNRY', 'ALF', 'VC', 'DSNT', 'DSIPTD',
    'V', 'OHD', 'OCNL', 'CONS',
    # Pressure
    'A3012', '52032', 'SLP132', 'PRESRR', 'PRESFR',
    # Misc
    'METAR', 'BNK', 'LGT', 'MTNS', 'AND', 'THRU', 'SPECI',
    # Visibility
    '10SM', 'VIS', 'R28L/2400VP6000FT',
]


def first_rule_index(library, token):
    for index, rule in enumerate(library):
        if rule.apply(token) is not None:
            return index
    return None


class TestRuleLibrary:
    """Tests for the assembled library."""

    def test_every_rule_reachable(self, library):
        """Each rule is the first match for its example token, in order."""
        indices = [first_rule_index(library, token) for token in EXAMPLES]

        assert None not in indices
        assert indices == sorted(indices)
        assert set(indices) == set(range(len(library)))

    def test_examples_decode_to_text(self, library):
        for token in EXAMPLES:
            explanation = library[first_rule_index(library, token)].apply(token).explanation
            assert explanation, token

    def test_station_rule_first(self, library):
        assert library[0].category == 'station'

    def test_specific_before_general(self, library):
        categories = library.categories()

        assert categories.index('vicinity-thunderstorm') < categories.index('thunderstorm')
        assert categories.index('ceiling-alt-dir') < categories.index('ceiling-alt')
        assert categories.index('ceiling-alt') < categories.index('ceiling')
        assert categories.index('rain-begin-end') < categories.index('rain-begin')
        assert categories.index('peak-wind-full') < categories.index('peak-wind')

    def test_shared_categories_listed_once(self, library):
        categories = library.categories()

        assert sum(1 for rule in library if rule.category == 'clouds') == 2
        assert categories.count('clouds') == 1
        assert len(categories) < len(library)

    def test_library_is_immutable(self, library):
        with pytest.raises(TypeError):
            library[0] = library[1]

    def test_lookup_only_changes_station_rule(self, airports):
        plain = build_rule_library()
        named = build_rule_library(airports)

        assert len(plain) == len(named)
        assert [rule.pattern for rule in plain][1:] == [rule.pattern for rule in named][1:]
        assert named[0].pattern == r'^[A-Z]{4}$'


class TestRuleLibraryContainer:
    """Tests for the RuleLibrary sequence."""

    def test_sequence_protocol(self):
        hint = DisplayHint(None, 'gray')
        rules = [
            DecodingRule(r'A', 'a', hint, lambda m: 'a'),
            DecodingRule(r'B', 'b', hint, lambda m: 'b'),
            DecodingRule(r'C', 'a', hint, lambda m: 'c'),
        ]
        library = RuleLibrary(rules)

        assert len(library) == 3
        assert list(library) == rules
        assert library[1].category == 'b'
        assert library.categories() == ['a', 'b']
