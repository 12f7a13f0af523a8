"""Airport reference table used to name stations."""

import logging
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

import pandas as pd

from metar_decoder.exceptions import AirportDataError
from metar_decoder.models import AirportRecord, IdentifierLookup

logger = logging.getLogger(__name__)

# Column order of the reference file; the header row names are ignored
COLUMNS = ['iata', 'icao', 'name', 'country', 'city', 'information']


class AirportTable(IdentifierLookup):
    """
    In-memory airport table keyed by ICAO code.

    Example:
        table = AirportTable.from_csv('airports.csv')
        decoder = MetarDecoder.with_lookup(table)
    """

    def __init__(self, airports: Dict[str, AirportRecord]):
        self._airports = airports

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> 'AirportTable':
        """
        Build the table from a frame with the six reference columns.

        Rows without an ICAO code are skipped; a later row wins over an
        earlier one with the same code.
        """
        airports: Dict[str, AirportRecord] = {}
        for _, row in df.iterrows():
            icao = row['icao'].strip()
            if not icao:
                continue
            airports[icao] = AirportRecord(
                icao=icao,
                name=row['name'].strip(),
                city=row['city'].strip(),
                country=row['country'].strip(),
                iata=row['iata'].strip(),
                information=row['information'].strip(),
            )
        return cls(airports)

    @classmethod
    def from_csv(cls, path: Union[str, Path]) -> 'AirportTable':
        """
        Load the reference file: header row, then short code, ICAO code,
        name, country, city and notes per record. Quoted values allowed.

        Raises:
            AirportDataError: If the file is missing or malformed
        """
        path = Path(path)
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding='utf-8-sig')
        except FileNotFoundError as e:
            raise AirportDataError(f"Airport table not found: {path}") from e
        except (ValueError, pd.errors.ParserError) as e:
            raise AirportDataError(f"Airport table {path} could not be read: {e}") from e

        if len(df.columns) < len(COLUMNS):
            raise AirportDataError(
                f"Airport table {path} has {len(df.columns)} columns, expected {len(COLUMNS)}"
            )
        df = df.iloc[:, :len(COLUMNS)].fillna('')
        df.columns = COLUMNS

        table = cls.from_dataframe(df)
        logger.info(f"Loaded {len(table)} airports from {path}")
        return table

    @classmethod
    def load_optional(cls, path: Optional[Union[str, Path]]) -> Optional['AirportTable']:
        """
        Load the table if possible.

        Returns None (after logging a warning) when no path is given or the
        file cannot be loaded, so stations fall back to the generic wording.
        """
        if not path:
            return None
        try:
            return cls.from_csv(path)
        except AirportDataError as e:
            logger.warning("%s; station names will not be resolved", e)
            return None

    def has(self, icao: str) -> bool:
        return icao in self._airports

    def get(self, icao: str) -> Optional[AirportRecord]:
        return self._airports.get(icao)

    def __contains__(self, icao: object) -> bool:
        return icao in self._airports

    def __iter__(self) -> Iterator[AirportRecord]:
        return iter(self._airports.values())

    def __len__(self) -> int:
        return len(self._airports)
