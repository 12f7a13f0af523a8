"""
Settings for the METAR decoder, read from the environment.
"""

import os
from typing import Optional

# Weather data source
API_URL = os.getenv("METAR_DECODER_API_URL", "https://aviationweather.gov/api/data")
REQUEST_TIMEOUT = int(os.getenv("METAR_DECODER_TIMEOUT", "15"))
USER_AGENT = "metar-decoder/0.1 (aviation weather tool)"

# Airport reference table (short code, long code, name, country, city, notes)
AIRPORTS_FILE: Optional[str] = os.getenv("METAR_DECODER_AIRPORTS") or None

# Logging
LOG_LEVEL = os.getenv("METAR_DECODER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Station identifiers accepted by the data source
ICAO_PATTERN = r'^[A-Z]{4}$'
