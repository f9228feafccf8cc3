"""Client side translation key plugin manager."""

from functools import lru_cache
from typing import List, Optional, Sequence

import pluggy
import structlog

from infrastructure import hookspecs
from infrastructure.services.plugins.base import auto_discover_plugins

logger = structlog.get_logger()


def create_translation_plugin_manager() -> pluggy.PluginManager:
    """Create a plugin manager with the translation hookspecs registered."""
    pm = pluggy.PluginManager("translation_resolver")
    pm.add_hookspecs(hookspecs.translations)
    return pm


@lru_cache(maxsize=1)
def get_translation_plugin_manager() -> pluggy.PluginManager:
    """Get the translation plugin manager singleton.

    Returns:
        PluginManager configured for client side translation keys.
    """
    pm = create_translation_plugin_manager()
    logger.info("translation_plugin_manager_created")
    return pm


def discover_translation_plugins(
    base_paths: Sequence[str],
    pm: Optional[pluggy.PluginManager] = None,
) -> pluggy.PluginManager:
    """Import plugin packages under base_paths and register them."""
    pm = pm or get_translation_plugin_manager()
    auto_discover_plugins(pm, base_paths=list(base_paths))
    logger.info("translation_plugins_discovered", plugin_count=len(pm.get_plugins()))
    return pm


def collect_client_side_translation_keys(
    pm: Optional[pluggy.PluginManager] = None,
) -> List[str]:
    """Collect client side translation identifiers from all plugins.

    Args:
        pm: Plugin manager to query. Defaults to the singleton.

    Returns:
        Flattened list of identifiers in hook call order. A plugin may
        return a single identifier instead of a list. May contain
        duplicates; the translator removes them.
    """
    pm = pm or get_translation_plugin_manager()
    keys: List[str] = []
    for result in pm.hook.get_client_side_translation_keys():
        if not result:
            continue
        if isinstance(result, str):
            keys.append(result)
        else:
            keys.extend(result)
    return keys
