"""Tests for the airport reference table."""

import logging

import pandas as pd
import pytest

from metar_decoder.exceptions import AirportDataError
from metar_decoder.sources.airports import AirportTable


class TestFromCsv:
    """Tests for loading the reference file."""

    def test_load(self, airports_csv):
        table = AirportTable.from_csv(airports_csv)

        assert len(table) == 2
        assert table.has('KBOS')
        assert 'EGLL' in table

    def test_record_fields(self, airports_csv):
        table = AirportTable.from_csv(airports_csv)

        record = table.get('EGLL')

        assert record.icao == 'EGLL'
        assert record.iata == 'LHR'
        assert record.name == 'London Heathrow Airport'
        assert record.country == 'United Kingdom'
        assert record.city == 'London'
        assert record.information == 'Hub, four terminals'

    def test_rows_without_icao_skipped(self, airports_csv):
        table = AirportTable.from_csv(airports_csv)

        assert not table.has('')
        assert all(record.icao for record in table)

    def test_unknown(self, airports_csv):
        table = AirportTable.from_csv(airports_csv)

        assert not table.has('KXYZ')
        assert table.get('KXYZ') is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(AirportDataError):
            AirportTable.from_csv(tmp_path / 'missing.csv')

    def test_too_few_columns(self, tmp_path):
        path = tmp_path / 'short.csv'
        path.write_text('IATA,ICAO\nBOS,KBOS\n', encoding='utf-8')

        with pytest.raises(AirportDataError):
            AirportTable.from_csv(path)


class TestFromDataFrame:
    """Tests for building the table from a frame."""

    def test_values_stripped(self):
        df = pd.DataFrame([{
            'iata': 'BOS', 'icao': ' KBOS ', 'name': ' Logan ',
            'country': 'United States', 'city': 'Boston', 'information': '',
        }])

        table = AirportTable.from_dataframe(df)

        assert table.get('KBOS').name == 'Logan'


class TestLoadOptional:
    """Tests for optional loading."""

    def test_no_path(self):
        assert AirportTable.load_optional(None) is None

    def test_missing_file_warns(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            table = AirportTable.load_optional(tmp_path / 'missing.csv')

        assert table is None
        assert 'station names will not be resolved' in caplog.text

    def test_existing_file(self, airports_csv):
        assert len(AirportTable.load_optional(airports_csv)) == 2
