"""
IPapi module - IP geolocation and country information
"""
import logging
from typing import Dict, Any, Optional
from ipview.modules.base import BaseModule
from ipview.models import DisplayRecord
from .query import query_ipapi_async
from .normalizer import normalize_ipapi_result, normalize_record

logger = logging.getLogger(__name__)


class IPapiModule(BaseModule):
    """
    ipapi.co lookup module.
    """

    MODULE_NAME = "IPapi"
    DISPLAY_NAME = "ipapi"
    DESCRIPTION = "IP geolocation, network and country information"
    SOURCE_URL = "https://ipapi.co"

    async def query(self, observable: Optional[str] = None, **kwargs) -> Optional[Dict[str, Any]]:
        """Query ipapi API"""
        return await query_ipapi_async(observable, **kwargs)

    def normalize(self, raw_result: Optional[Dict[str, Any]]) -> Optional[DisplayRecord]:
        """Normalize ipapi response"""
        return normalize_ipapi_result(raw_result)


# Module instance - automatically discovered
module = IPapiModule()

__all__ = ['module', 'query_ipapi_async', 'normalize_ipapi_result', 'normalize_record']
