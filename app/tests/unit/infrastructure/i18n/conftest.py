"""Feature-level fixtures for i18n system tests.

Provides temporary translation directories and translator instances.
"""

import json

import pytest
import yaml

from tests.factories.i18n import InMemoryTranslationLoader, make_messages, make_translator


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - en.yml
    - de.yml
    - Goals.en.yml
    """
    lang_dir = tmp_path / "lang"
    lang_dir.mkdir()
    with open(lang_dir / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(make_messages("en"), f, allow_unicode=True)
    with open(lang_dir / "de.yml", "w", encoding="utf-8") as f:
        yaml.dump(make_messages("de"), f, allow_unicode=True)
    with open(lang_dir / "Goals.en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"Goals": {"Goal": "Goal", "Goals": "Goals"}}, f)
    return lang_dir


@pytest.fixture
def plugin_translations_dir(tmp_path):
    """Create a second YAML directory overriding some English keys."""
    plugin_dir = tmp_path / "plugin_lang"
    plugin_dir.mkdir()
    with open(plugin_dir / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {
                "General": {"Date": "Day"},
                "MyPlugin": {"Title": "My Plugin"},
            },
            f,
        )
    return plugin_dir


@pytest.fixture
def temp_json_translations_dir(tmp_path):
    """Create temporary directory with JSON translation files."""
    lang_dir = tmp_path / "json_lang"
    lang_dir.mkdir()
    with open(lang_dir / "en.json", "w", encoding="utf-8") as f:
        json.dump(make_messages("en"), f)
    with open(lang_dir / "de.json", "w", encoding="utf-8") as f:
        json.dump(make_messages("de"), f, ensure_ascii=False)
    return lang_dir


@pytest.fixture
def memory_loader():
    """In-memory loader with English and German messages."""
    return InMemoryTranslationLoader()


@pytest.fixture
def translator(memory_loader):
    """Translator with English default language and in-memory loader."""
    return make_translator(loader=memory_loader)
