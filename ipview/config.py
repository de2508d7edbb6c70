"""
Central configuration file for endpoints and display tables.
Lookup tables are read-only and shared by the normalizer and the templates.
"""
from types import MappingProxyType
from typing import Optional

# Outbound endpoints
IP_ECHO_URL = 'https://api.ipify.org?format=json'
GEOLOCATION_URL = 'https://ipapi.co/{ip}/json/'
FLAG_URL = 'https://flagcdn.com/w160/{country_code}.png'

# Seconds before an outbound request is abandoned
REQUEST_TIMEOUT = 30

# Raw population is reported in people; cards show crores (ten millions)
POPULATION_DIVISOR = 10_000_000

CONTINENT_NAMES = MappingProxyType({
    'AF': 'Africa',
    'AN': 'Antarctica',
    'AS': 'Asia',
    'EU': 'Europe',
    'NA': 'North America',
    'OC': 'Oceania',
    'SA': 'South America',
})

# ISO 639-1 short names for codes whose ISO 639-3 reference name differs
LANGUAGE_NAMES = MappingProxyType({
    'ab': 'Abkhaz',
    'cu': 'Old Church Slavonic',
    'dv': 'Divehi',
    'el': 'Greek',
    'ff': 'Fula',
    'ht': 'Haitian Creole',
    'ia': 'Interlingua',
    'ii': 'Nuosu',
    'kj': 'Kwanyama',
    'ky': 'Kyrgyz',
    'li': 'Limburgish',
    'ms': 'Malay',
    'nd': 'Northern Ndebele',
    'ne': 'Nepali',
    'nr': 'Southern Ndebele',
    'ny': 'Chichewa',
    'oc': 'Occitan',
    'or': 'Oriya',
    'pa': 'Punjabi',
    'ps': 'Pashto',
    'rn': 'Kirundi',
    'sw': 'Swahili',
    'to': 'Tonga',
    'ug': 'Uyghur',
})

# Cards are laid out in this order; anything else follows in payload order
FIELD_ORDER = (
    'ip',
    'continent_name',
    'continent_code',
    'country_name',
    'country_code',
    'country_code_iso3',
    'country_capital',
    'country_tld',
    'city',
    'region',
    'region_code',
    'postal',
    'latitude',
    'longitude',
    'timezone',
    'utc_offset',
    'country_calling_code',
    'currency',
    'currency_name',
    'languages',
    'country_area',
    'country_population',
    'org',
)

FIELD_LABELS = MappingProxyType({
    'ip': 'IP Address',
    'continent_name': 'Continent Name',
    'continent_code': 'Continent Code',
    'country_name': 'Country Name',
    'country_code': 'Country Code',
    'country_code_iso3': 'Country Code ISO3',
    'country_capital': 'Country Capital',
    'country_tld': 'Country TLD (top level domain)',
    'city': 'City',
    'region': 'Region',
    'region_code': 'Region Code',
    'postal': 'Postal Code',
    'latitude': 'Latitude',
    'longitude': 'Longitude',
    'timezone': 'Timezone',
    'utc_offset': 'UTC Offset',
    'country_calling_code': 'Country Calling Code',
    'currency': 'Currency',
    'currency_name': 'Currency Name',
    'languages': 'Spoken Languages',
    'country_area': 'Country Area (sq.km)',
    'country_population': 'Country Population (crores)',
    'org': 'ISP',
    'network': 'Network',
    'version': 'Version',
    'in_eu': 'In EU',
    'country': 'Country',
    'asn': 'ASN',
})


def get_field_label(key: str) -> str:
    """Get the card label for a record key, falling back to the key itself"""
    return FIELD_LABELS.get(key, key)


def get_continent_name(continent_code: str) -> Optional[str]:
    """Get the continent name for a two-letter continent code"""
    return CONTINENT_NAMES.get(continent_code)


def get_flag_url(country_code: Optional[str]) -> Optional[str]:
    """
    Get the flag image URL for a two-letter country code.

    Args:
        country_code: ISO 3166-1 alpha-2 code in any case

    Returns:
        flagcdn URL, or None when there is no usable code
    """
    if not country_code or not isinstance(country_code, str):
        return None
    return FLAG_URL.format(country_code=country_code.strip().lower())
