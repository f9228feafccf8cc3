"""Base plugin discovery utilities."""

import importlib
import pkgutil
from typing import List

import pluggy
import structlog

logger = structlog.get_logger()


def auto_discover_plugins(
    pm: pluggy.PluginManager,
    base_paths: List[str],
) -> None:
    """Auto-discover and register plugins from importable packages.

    Each entry of base_paths is a dotted package name (e.g. "plugins"). Every
    module or subpackage directly inside it is imported and registered, so any
    function decorated with @hookimpl becomes a hook implementation.

    Args:
        pm: Plugin manager to register plugins with.
        base_paths: Dotted names of packages to scan.

    Example:
        >>> pm = create_translation_plugin_manager()
        >>> auto_discover_plugins(pm, base_paths=["plugins"])
        >>> pm.hook.get_client_side_translation_keys()
    """
    for base_path in base_paths:
        try:
            package = importlib.import_module(base_path)
        except ImportError:
            logger.warning("base_path_not_found", path=base_path)
            continue

        search_path = getattr(package, "__path__", None)
        if search_path is None:
            logger.warning("base_path_not_a_package", path=base_path)
            continue

        logger.debug("scanning_base_path", path=base_path)

        for module_info in pkgutil.iter_modules(search_path):
            module_name = f"{base_path}.{module_info.name}"
            try:
                module = importlib.import_module(module_name)
                if pm.is_registered(module):
                    continue
                pm.register(module)
                logger.debug("plugin_registered", module=module_name)
            except Exception as e:  # pylint: disable=broad-except
                logger.error(
                    "plugin_registration_failed",
                    module=module_name,
                    error=str(e),
                    exc_info=True,
                )
