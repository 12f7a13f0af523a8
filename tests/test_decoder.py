"""Tests for token dispatch and report translation."""

from metar_decoder.decoder import MetarDecoder, annotate, decode_token, translate
from metar_decoder.models import DecodingRule, DisplayHint
from metar_decoder.rules import RuleLibrary, build_rule_library

KBOS_REPORT = 'KBOS 121651Z 24016G25KT 10SM FEW250 22/12 A3012 RMK AO2'

KBOS_SENTENCES = [
    'Time: Day 12, 16:51 UTC (Zulu time)',
    'Wind: 240° at 16 knots, gusting to 25 knots',
    'Visibility: 10 statute miles',
    'Few clouds at 25,000 feet',
    'Temperature: 22°C, Dewpoint: 12°C',
    'Altimeter: 30.12 inHg',
    'Remarks section begins',
    'Automated station with precipitation discriminator',
]


class TestDecodeToken:
    """Tests for decode_token."""

    def test_first_match_wins(self):
        hint = DisplayHint(None, 'gray')
        library = RuleLibrary([
            DecodingRule(r'AB', 'first', hint, lambda m: 'first'),
            DecodingRule(r'A', 'second', hint, lambda m: 'second'),
        ])

        assert decode_token('AB', library).category == 'first'
        assert decode_token('A', library).category == 'second'

    def test_declined_rule_is_skipped(self):
        hint = DisplayHint(None, 'gray')
        library = RuleLibrary([
            DecodingRule(r'A', 'declines', hint, lambda m: None),
            DecodingRule(r'A', 'accepts', hint, lambda m: 'accepted'),
        ])

        decoded = decode_token('A', library)

        assert decoded.category == 'accepts'
        assert decoded.explanation == 'accepted'

    def test_unknown_token(self, library):
        assert decode_token('ZZZ9', library) is None

    def test_empty_library(self):
        assert decode_token('KBOS', RuleLibrary([])) is None

    def test_same_result_every_time(self, library):
        assert decode_token('24016G25KT', library) == decode_token('24016G25KT', library)


class TestAnnotate:
    """Tests for annotate."""

    def test_one_entry_per_token(self, library):
        annotated = annotate('KBOS 24016G25KT ZZZ9', library)

        assert [token.token for token in annotated] == ['KBOS', '24016G25KT', 'ZZZ9']
        assert annotated[1].category == 'wind'
        assert annotated[1].hint == DisplayHint('wind', 'green')

    def test_unknown_token_undecoded(self, library):
        annotated = annotate('ZZZ9', library)

        assert annotated[0].category is None
        assert annotated[0].hint is None
        assert annotated[0].explanation is None

    def test_multi_word_group(self, library):
        annotated = annotate('RMK PK WND 28015/25', library)

        assert len(annotated) == 2
        assert annotated[1].category == 'peak-wind-full'

    def test_empty(self, library):
        assert annotate('', library) == []


class TestTranslate:
    """Tests for translate."""

    def test_report_without_lookup(self, library):
        assert translate(KBOS_REPORT, library) == '. '.join(
            ['Airport: KBOS (ICAO identifier)'] + KBOS_SENTENCES
        ) + '.'

    def test_report_with_lookup(self, airports):
        library = build_rule_library(airports)

        result = translate(KBOS_REPORT, library)

        assert result.startswith(
            'Airport: General Edward Lawrence Logan International Airport (KBOS)'
            ' - Boston, United States. '
        )
        assert result.endswith('Automated station with precipitation discriminator.')

    def test_unknown_station_with_lookup_kept_literal(self, airports):
        library = build_rule_library(airports)
        assert translate('KXYZ 121651Z', library) == (
            'KXYZ. Time: Day 12, 16:51 UTC (Zulu time).'
        )

    def test_unknown_tokens_kept(self, library):
        assert translate('RMK ZZZ9', library) == 'Remarks section begins. ZZZ9.'

    def test_empty(self, library):
        assert translate('', library) == '.'
        assert translate('   ', library) == '.'

    def test_remarks(self, library):
        result = translate('RMK AO2 PK WND 28045/15 SLP132 T02220122', library)
        assert result == (
            'Remarks section begins. '
            'Automated station with precipitation discriminator. '
            'Peak wind from 280° at 45 knots, occurring at 15 minutes past the hour. '
            'Sea-level pressure: 1013.2 hPa. '
            'Precise temperature: 22.2°C, Dewpoint: 12.2°C.'
        )

    def test_never_raises(self, library):
        for text in ['////', '\x00', 'R/', 'CIG ///', '+', '-', 'M/M', '6////', 'ééé']:
            assert translate(text, library).endswith('.')


class TestMetarDecoder:
    """Tests for the MetarDecoder convenience object."""

    def test_default_library(self):
        decoder = MetarDecoder()

        assert len(decoder.library) > 0
        assert decoder.translate('RMK') == 'Remarks section begins.'
        assert decoder.segment('PK WND 28015/25') == ['PK WND 28015/25']
        assert decoder.decode_token('AO2').category == 'precip-discriminator'
        assert decoder.annotate('RMK')[0].explanation == 'Remarks section begins'

    def test_with_lookup(self, airports):
        decoder = MetarDecoder.with_lookup(airports)
        assert decoder.decode_token('KBOS').explanation.startswith('Airport: General Edward')

    def test_with_missing_lookup(self):
        decoder = MetarDecoder.with_lookup(None)
        assert decoder.decode_token('KBOS').explanation == 'Airport: KBOS (ICAO identifier)'
