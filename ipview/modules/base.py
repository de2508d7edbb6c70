"""
Base module class for the lookup stages.
Each module implements the query/normalize pattern.
"""
from typing import Dict, Any, Optional
from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)


class BaseModule(ABC):
    """
    Base class for lookup modules.
    Each module should inherit from this and define its configuration.

    Modules are self-contained:
    - Query logic in query.py
    - Normalization in normalizer.py
    - Module class in __init__.py
    """

    # Module metadata - must be defined by subclasses
    MODULE_NAME: str = ""
    DISPLAY_NAME: str = ""
    DESCRIPTION: str = ""
    SOURCE_URL: str = ""

    @abstractmethod
    async def query(self, observable: Optional[str] = None, **kwargs) -> Optional[Dict[str, Any]]:
        """
        Query the module's web service.

        Args:
            observable: The IP address to look up, if the service takes one
            **kwargs: Additional module-specific parameters (e.g. timeout)

        Returns:
            Raw response data (will be normalized later)

        Raises:
            aiohttp.ClientError, asyncio.TimeoutError: on network or HTTP failure
        """
        pass

    @abstractmethod
    def normalize(self, raw_result: Optional[Dict[str, Any]]) -> Any:
        """
        Normalize the raw response into the shape the next stage consumes.

        Args:
            raw_result: Raw response from query()
        """
        pass

    def get_config(self) -> Dict[str, Any]:
        """Get module configuration"""
        return {
            "name": self.MODULE_NAME,
            "display_name": self.DISPLAY_NAME,
            "description": self.DESCRIPTION,
            "source_url": self.SOURCE_URL,
        }
