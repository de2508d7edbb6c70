"""
IPify query module - asks the IP-echo service for the caller's public address
"""
import aiohttp
import logging
from typing import Optional, Dict, Any

from ipview.config import IP_ECHO_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


async def query_ipify_async(timeout: Optional[float] = None, **kwargs) -> Dict[str, Any]:
    """
    Queries the IPify API for the public IP address of this host.

    Args:
        timeout (float): Total request timeout in seconds.
        **kwargs: Additional parameters (ignored)

    Returns:
        dict: Raw API response data.

    Raises:
        aiohttp.ClientError: If the request fails or returns a non-2xx status.
        asyncio.TimeoutError: If the service does not answer in time.
    """
    client_timeout = aiohttp.ClientTimeout(total=timeout or REQUEST_TIMEOUT)
    logger.info(f"Querying IPify API: {IP_ECHO_URL}")

    async with aiohttp.ClientSession(timeout=client_timeout) as session:
        async with session.get(IP_ECHO_URL) as response:
            response.raise_for_status()
            data = await response.json(content_type=None)

    logger.info("Raw IPify response received")
    return {"raw_data": data}
