"""Plugin managers and utilities."""

import pluggy

from infrastructure.services.plugins.translations import (
    collect_client_side_translation_keys,
    get_translation_plugin_manager,
)

# Singleton hookimpl marker for entire application
hookimpl = pluggy.HookimplMarker("translation_resolver")

__all__ = [
    "hookimpl",
    "get_translation_plugin_manager",
    "collect_client_side_translation_keys",
]
