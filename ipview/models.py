"""
Record types passed between the lookup stages and the view.
"""
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional, Tuple

from ipview.config import get_flag_url

# Fields the geolocation API is known to return
KNOWN_FIELDS = frozenset({
    'ip', 'country', 'country_name', 'country_code', 'country_code_iso3',
    'country_capital', 'country_tld', 'city', 'region', 'region_code',
    'postal', 'latitude', 'longitude', 'timezone', 'utc_offset',
    'country_calling_code', 'currency', 'currency_name', 'languages',
    'country_area', 'country_population', 'continent_code', 'in_eu', 'org',
    'network', 'version', 'asn',
})


class RawRecord(Mapping):
    """
    Unprocessed geolocation payload.

    Recognized fields and unrecognized ones are held separately so callers
    can tell schema drift apart from the data they expect. Iteration follows
    the order keys appeared in the payload.
    """

    def __init__(self, known: Dict[str, Any], additional: Dict[str, Any], key_order: Tuple[str, ...]):
        self.known = known
        self.additional = additional
        self.key_order = key_order

    @classmethod
    def from_payload(cls, payload: Mapping) -> 'RawRecord':
        """Split a decoded JSON object into known and additional fields"""
        known = {}
        additional = {}
        for key, value in payload.items():
            if key in KNOWN_FIELDS:
                known[key] = value
            else:
                additional[key] = value
        return cls(known, additional, tuple(payload.keys()))

    def __getitem__(self, key: str) -> Any:
        if key in self.known:
            return self.known[key]
        return self.additional[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.key_order)

    def __len__(self) -> int:
        return len(self.key_order)

    def __repr__(self) -> str:
        return f"RawRecord(known={self.known!r}, additional={self.additional!r})"


class DisplayRecord(Mapping):
    """Normalized, ordered record ready for rendering"""

    def __init__(self, fields: Dict[str, Any]):
        self._fields = dict(fields)

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"DisplayRecord({self._fields!r})"

    @property
    def ip(self) -> Optional[str]:
        return self._fields.get('ip')

    @property
    def flag_url(self) -> Optional[str]:
        return get_flag_url(self._fields.get('country_code'))

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._fields)
