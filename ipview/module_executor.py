"""
Module executor - runs a lookup module's query and normalize steps.
"""
import logging
from typing import Dict, Any, Optional
from ipview.modules.base import BaseModule
from ipview.module_discovery import discover_modules

logger = logging.getLogger(__name__)


class ModuleExecutor:
    """
    Executes lookup modules through the BaseModule interface.
    Network failures are logged and re-raised to the caller.
    """

    def __init__(self, modules: Optional[Dict[str, BaseModule]] = None):
        """
        Initialize executor.

        Args:
            modules: Optional pre-discovered modules dict. If None, will auto-discover.
        """
        self.modules: Dict[str, BaseModule] = modules or {}
        if not self.modules:
            self._load_modules()

    def _load_modules(self):
        """Load all discovered modules"""
        self.modules = discover_modules()
        logger.info(f"Loaded {len(self.modules)} modules")

    def get_module(self, name: str) -> BaseModule:
        """Get a module by name"""
        try:
            return self.modules[name]
        except KeyError:
            raise LookupError(f"Module {name} not found") from None

    async def execute_module(self, module_name: str, observable: Optional[str] = None, **kwargs) -> Any:
        """
        Execute a single module.

        Args:
            module_name: Name of the module to execute
            observable: The IP address to query, if the module takes one
            **kwargs: Module-specific parameters

        Returns:
            Normalized result
        """
        module = self.get_module(module_name)
        logger.info(f"Executing {module_name} for {observable or 'this host'}")

        try:
            raw_result = await module.query(observable, **kwargs)
        except Exception as e:
            logger.error(f"Error executing {module_name}: {e}", exc_info=True)
            raise

        logger.debug(f"{module_name} raw_result sample: {str(raw_result)[:200]}")
        normalized = module.normalize(raw_result)
        logger.debug(f"{module_name} normalized result: {str(normalized)[:300]}")
        return normalized


# Global executor instance (can be replaced with custom instance)
module_executor = ModuleExecutor()
