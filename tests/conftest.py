import pytest

from metar_decoder.models import AirportRecord, MappingLookup
from metar_decoder.rules import build_rule_library


@pytest.fixture
def library():
    """Rule library without an airport table."""
    return build_rule_library()


@pytest.fixture
def airports() -> MappingLookup:
    """Small airport lookup with a single known station."""
    return MappingLookup({
        'KBOS': AirportRecord(
            icao='KBOS',
            name='General Edward Lawrence Logan International Airport',
            city='Boston',
            country='United States',
            iata='BOS',
        ),
    })


@pytest.fixture
def explain(library):
    """Explanation of a single token, or None if no rule decodes it."""
    from metar_decoder.decoder import decode_token

    def _explain(token: str):
        decoded = decode_token(token, library)
        return decoded.explanation if decoded else None

    return _explain


@pytest.fixture
def category(library):
    """Category of the rule decoding a single token, or None."""
    from metar_decoder.decoder import decode_token

    def _category(token: str):
        decoded = decode_token(token, library)
        return decoded.category if decoded else None

    return _category


@pytest.fixture
def airports_csv(tmp_path):
    """Airport reference file in the six-column layout."""
    path = tmp_path / 'airports.csv'
    path.write_text(
        'IATA,ICAO,Airport name,Country,City,Information\n'
        'BOS,KBOS,General Edward Lawrence Logan International Airport,United States,Boston,\n'
        'LHR,EGLL,"London Heathrow Airport",United Kingdom,London,"Hub, four terminals"\n'
        'XXX,,No ICAO code,Nowhere,Nowhere,\n',
        encoding='utf-8',
    )
    return path
