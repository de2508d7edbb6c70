"""
IPapi normalizer - turns a geolocation payload into an ordered display record
"""
import logging
import math
from collections.abc import Mapping
from typing import Dict, Any, Optional

import pycountry

from ipview.config import FIELD_ORDER, LANGUAGE_NAMES, POPULATION_DIVISOR, get_continent_name
from ipview.models import DisplayRecord, RawRecord

logger = logging.getLogger(__name__)

# Pulled out of the record before the remaining fields are copied over
EXTRACTED_FIELDS = ('country', 'in_eu', 'country_population', 'continent_code', 'languages')


def get_language_name(code: str) -> Optional[str]:
    """
    Get the English name of an ISO 639-1 language code.
    Codes are matched as written: only lowercase two-letter codes are known.
    """
    if len(code) != 2 or not code.isalpha() or not code.islower():
        return None
    language = pycountry.languages.get(alpha_2=code)
    if not language:
        return None
    return LANGUAGE_NAMES.get(code, language.name)


def translate_languages(languages: Any) -> str:
    """
    Translate a comma-separated list of ISO 639-1 codes into language names.
    Codes without a known name (including regional tags like "en-US") are
    kept as given.
    """
    names = []
    for code in str(languages).split(','):
        code = code.strip()
        names.append(get_language_name(code) or code)
    return ", ".join(names)


def population_in_ten_millions(population: Any) -> float:
    """Convert a head count to crores; non-numeric input gives nan"""
    if isinstance(population, (int, float)):
        return population / POPULATION_DIVISOR
    try:
        return float(population) / POPULATION_DIVISOR
    except (TypeError, ValueError):
        logger.warning(f"Non-numeric country_population: {population!r}")
        return math.nan


def reorder_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Put known fields first in FIELD_ORDER, then the rest in their original order"""
    ordered = {key: data[key] for key in FIELD_ORDER if key in data}

    for key, value in data.items():
        if key not in ordered:
            ordered[key] = value

    return ordered


def normalize_record(raw: Mapping) -> DisplayRecord:
    """
    Reshape a geolocation record for display.

    Drops country and in_eu, converts population to crores, names the
    spoken languages and continent, then orders the keys for the card grid.
    Bad values produce odd fields rather than exceptions.

    Args:
        raw: Geolocation payload (a RawRecord or any mapping)

    Returns:
        DisplayRecord with the normalized fields
    """
    rest = {key: value for key, value in raw.items() if key not in EXTRACTED_FIELDS}

    country_population = raw.get('country_population')
    languages = raw.get('languages')
    continent_code = raw.get('continent_code')

    if country_population:
        rest['country_population'] = population_in_ten_millions(country_population)

    if languages:
        rest['languages'] = translate_languages(languages)

    if continent_code:
        rest['continent_code'] = continent_code
        rest['continent_name'] = get_continent_name(continent_code)
        if rest['continent_name'] is None:
            logger.warning(f"Unknown continent code: {continent_code!r}")

    return DisplayRecord(reorder_keys(rest))


def normalize_ipapi_result(raw_result: Optional[Dict[str, Any]]) -> Optional[DisplayRecord]:
    """
    Normalize ipapi API response into a display record.

    Args:
        raw_result: Raw API response from query_ipapi_async

    Returns:
        DisplayRecord, or None if no usable payload was received
    """
    if not raw_result or not isinstance(raw_result.get("raw_data"), Mapping):
        logger.warning("No data received from ipapi")
        return None

    record = RawRecord.from_payload(raw_result["raw_data"])
    if record.additional:
        logger.debug(f"ipapi returned unrecognized fields: {list(record.additional.keys())}")

    normalized = normalize_record(record)
    logger.info(f"Normalized ipapi result for {raw_result.get('observable', 'Unknown')}")
    return normalized
