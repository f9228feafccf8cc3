"""Hook specifications for client side translation keys."""

from typing import List

import pluggy

hookspec = pluggy.HookspecMarker("translation_resolver")


@hookspec
def get_client_side_translation_keys() -> List[str]:
    """Return the translation identifiers to expose to the client side.

    Implementations must return fully qualified identifiers, i.e. including
    the domain (``"MyPlugin_MyTranslation"``). A single identifier may be
    returned as a plain string.

    Example:
        @hookimpl
        def get_client_side_translation_keys():
            return ["MyPlugin_MyTranslation"]
    """
