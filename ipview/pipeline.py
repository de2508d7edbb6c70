"""
Lookup pipeline: resolve the address, fetch its geolocation, normalize it.
"""
import logging
from typing import Optional

from ipview.ip_resolver import resolve_ip_address
from ipview.models import DisplayRecord
from ipview.module_executor import ModuleExecutor, module_executor

logger = logging.getLogger(__name__)


async def lookup_ip_info(ip_override: Optional[str] = None,
                         executor: Optional[ModuleExecutor] = None,
                         **kwargs) -> Optional[DisplayRecord]:
    """
    Run the full lookup for one page view.

    Args:
        ip_override: Address from the request, or None to use this host's public address
        executor: Executor to run the lookup modules with
        **kwargs: Passed through to the module queries (e.g. timeout)

    Returns:
        DisplayRecord, or None when no address could be resolved

    Raises:
        aiohttp.ClientError, asyncio.TimeoutError: if either service call fails
    """
    executor = executor or module_executor

    ip_address = await resolve_ip_address(ip_override, executor=executor, **kwargs)
    if not ip_address:
        logger.warning("No IP address resolved, skipping geolocation lookup")
        return None

    record = await executor.execute_module("IPapi", ip_address, **kwargs)
    if record is not None:
        logger.info(f"Lookup for {ip_address} produced {len(record)} fields")
    return record
