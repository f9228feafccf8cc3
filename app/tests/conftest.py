import pytest

from infrastructure.services import providers
from infrastructure.services.plugins import translations as translation_plugins


@pytest.fixture(autouse=True)
def clear_singletons():
    """Drop cached singletons so each test builds its own."""
    yield
    providers.get_settings.cache_clear()
    providers.get_translator.cache_clear()
    providers.get_translation_service.cache_clear()
    translation_plugins.get_translation_plugin_manager.cache_clear()
