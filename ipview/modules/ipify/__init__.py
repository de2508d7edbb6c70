"""
IPify module - public IP address of the requesting host
"""
import logging
from typing import Dict, Any, Optional
from ipview.modules.base import BaseModule
from .query import query_ipify_async
from .normalizer import normalize_ipify_result

logger = logging.getLogger(__name__)


class IPifyModule(BaseModule):
    """
    IPify lookup module.
    Takes no observable: the service echoes the address the request came from.
    """

    MODULE_NAME = "IPify"
    DISPLAY_NAME = "IPify"
    DESCRIPTION = "Public IP address echo service"
    SOURCE_URL = "https://www.ipify.org"

    async def query(self, observable: Optional[str] = None, **kwargs) -> Optional[Dict[str, Any]]:
        """Query IPify API"""
        return await query_ipify_async(**kwargs)

    def normalize(self, raw_result: Optional[Dict[str, Any]]) -> Optional[str]:
        """Normalize IPify response"""
        return normalize_ipify_result(raw_result)


# Module instance - automatically discovered
module = IPifyModule()

__all__ = ['module', 'query_ipify_async', 'normalize_ipify_result']
