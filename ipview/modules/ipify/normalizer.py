"""
IPify normalizer - extracts the echoed address
"""
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


def normalize_ipify_result(raw_result: Optional[Dict[str, Any]]) -> Optional[str]:
    """
    Pull the address out of an IPify response.

    Args:
        raw_result: Raw API response from query_ipify_async

    Returns:
        The IP address string, or None if the response carried none
    """
    if not raw_result or not isinstance(raw_result.get("raw_data"), dict):
        logger.warning("No data received from IPify")
        return None

    ip_address = raw_result["raw_data"].get("ip")
    if not ip_address:
        logger.warning(f"IPify response has no address: {str(raw_result['raw_data'])[:200]}")
        return None

    logger.info(f"Normalized IPify result: {ip_address}")
    return ip_address
