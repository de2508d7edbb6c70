"""
Automatic module discovery and registration system.
Discovers all modules in ipview/modules/ and registers them automatically.
"""
import os
import importlib
import logging
from typing import Dict, Optional
from ipview.modules.base import BaseModule

logger = logging.getLogger(__name__)


def discover_modules(modules_dir: Optional[str] = None) -> Dict[str, BaseModule]:
    """
    Automatically discover all modules in the modules directory.

    Args:
        modules_dir: Path to modules directory (default: ipview/modules)

    Returns:
        Dictionary mapping module names to module instances
    """
    if modules_dir is None:
        modules_dir = os.path.join(os.path.dirname(__file__), 'modules')

    discovered_modules = {}

    if not os.path.exists(modules_dir):
        logger.warning(f"Modules directory not found: {modules_dir}")
        return discovered_modules

    for item in sorted(os.listdir(modules_dir)):
        module_path = os.path.join(modules_dir, item)

        # Skip plain files and private/cache directories
        if not os.path.isdir(module_path) or item.startswith('_'):
            continue

        try:
            module = importlib.import_module(f"ipview.modules.{item}")
        except ImportError as e:
            logger.warning(f"Could not import module {item}: {e}")
            continue
        except Exception as e:
            logger.error(f"Error loading module {item}: {e}", exc_info=True)
            continue

        if hasattr(module, 'module') and isinstance(module.module, BaseModule):
            module_instance = module.module
            discovered_modules[module_instance.MODULE_NAME] = module_instance
            logger.info(f"Discovered module: {module_instance.MODULE_NAME}")
        else:
            logger.warning(f"Module {item} does not have a valid module instance in __init__.py")

    return discovered_modules
