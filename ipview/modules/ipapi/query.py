"""
IPapi query module - handles geolocation API communication
"""
import aiohttp
import logging
from typing import Optional, Dict, Any
from urllib.parse import quote

from ipview.config import GEOLOCATION_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


async def query_ipapi_async(ip_address: str, timeout: Optional[float] = None, **kwargs) -> Dict[str, Any]:
    """
    Queries the ipapi.co API for geolocation of an IP address.
    The address is not validated; ipapi answers malformed input with an
    error payload, which is passed through like any other record.

    Args:
        ip_address (str): The IP address to query.
        timeout (float): Total request timeout in seconds.
        **kwargs: Additional parameters (ignored)

    Returns:
        dict: Raw API response data and the queried address.

    Raises:
        aiohttp.ClientError: If the request fails or returns a non-2xx status.
        asyncio.TimeoutError: If the service does not answer in time.
    """
    url = GEOLOCATION_URL.format(ip=quote(ip_address, safe=':'))
    client_timeout = aiohttp.ClientTimeout(total=timeout or REQUEST_TIMEOUT)
    logger.info(f"Querying ipapi for IP: {ip_address}")

    async with aiohttp.ClientSession(timeout=client_timeout) as session:
        async with session.get(url) as response:
            if response.status != 200:
                error_text = await response.text()
                logger.warning(f"ipapi returned status {response.status}: {error_text[:200]}")
            response.raise_for_status()
            data = await response.json(content_type=None)

    if isinstance(data, dict) and data.get("error"):
        logger.warning(f"ipapi reported an error for {ip_address}: {data.get('reason', 'unknown reason')}")

    logger.info("Raw ipapi response received")
    return {
        "raw_data": data,
        "observable": ip_address
    }
