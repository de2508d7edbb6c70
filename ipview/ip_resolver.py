import logging
from typing import Optional

from ipview.module_executor import ModuleExecutor, module_executor

logger = logging.getLogger(__name__)


async def resolve_ip_address(ip_override: Optional[str] = None,
                             executor: Optional[ModuleExecutor] = None,
                             **kwargs) -> Optional[str]:
    """
    Determines the IP address to look up.

    Args:
        ip_override (str): Address supplied by the visitor (the ``ip`` query
            parameter). Used verbatim when non-empty.
        executor (ModuleExecutor): Executor to run the IP-echo module with.
        **kwargs: Passed through to the module query (e.g. timeout)

    Returns:
        str: The address, or None if the echo service returned none
    """
    if ip_override:
        logger.info(f"Using IP address from request: {ip_override}")
        return ip_override

    executor = executor or module_executor
    ip_address = await executor.execute_module("IPify", **kwargs)
    logger.info(f"Resolved public IP address: {ip_address}")
    return ip_address
