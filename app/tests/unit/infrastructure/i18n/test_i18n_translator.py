"""Tests for infrastructure.i18n.translator module."""

# pylint: disable=protected-access

import threading
from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import (
    FormatError,
    StaticLanguageProvider,
    Translator,
    YAMLTranslationLoader,
)
from tests.factories.i18n import InMemoryTranslationLoader, make_messages, make_translator


class TestTranslatorInitialization:
    """Tests for Translator construction and state accessors."""

    def test_translator_initialization(self, memory_loader):
        """Translator starts with the default language and no catalogs."""
        translator = make_translator(loader=memory_loader, default_language="de")
        assert translator.loader is memory_loader
        assert translator.fallback_language == "en"
        assert translator.get_current_language() == "de"
        assert translator.catalogs == {}
        assert memory_loader.calls == []

    def test_directories_are_deduplicated(self, memory_loader):
        """Initial directories keep their order without duplicates."""
        translator = make_translator(loader=memory_loader, directories=["/a", "/b", "/a"])
        assert translator.get_directories() == ["/a", "/b"]

    def test_default_language_falls_back_to_en(self, memory_loader):
        """A provider returning nothing yields "en"."""
        translator = Translator(memory_loader, language_provider=StaticLanguageProvider(""))
        assert translator.get_default_language() == "en"

    def test_default_language_provider_failure(self, memory_loader):
        """A failing provider yields "en"."""
        provider = MagicMock()
        provider.get_default_language.side_effect = RuntimeError("config unavailable")
        translator = Translator(memory_loader, language_provider=provider)
        assert translator.get_current_language() == "en"

    def test_set_current_language(self, translator):
        """set_current_language() changes the active language."""
        translator.set_current_language("de")
        assert translator.get_current_language() == "de"

    @pytest.mark.parametrize("language", [None, ""])
    def test_set_current_language_falsy_resets_to_default(self, memory_loader, language):
        """A falsy language resets to the configured default, not to ""."""
        translator = make_translator(loader=memory_loader, default_language="de")
        translator.set_current_language("fr")
        translator.set_current_language(language)
        assert translator.get_current_language() == "de"


class TestTranslate:
    """Tests for translate()."""

    def test_translate_basic(self, translator):
        """translate() resolves an identifier in the current language."""
        assert translator.translate("General_Date") == "Date"

    def test_translate_current_language(self, translator):
        """translate() uses the current language."""
        translator.set_current_language("de")
        assert translator.translate("General_Date") == "Datum"

    def test_translate_language_override(self, translator):
        """A language argument overrides the current language."""
        assert translator.translate("General_Date", language="de") == "Datum"
        assert translator.get_current_language() == "en"

    def test_translate_non_string_language_ignored(self, translator):
        """A non-string language argument falls back to the current language."""
        assert translator.translate("General_Date", language=1) == "Date"

    @pytest.mark.parametrize("language", ["en", "de", "fr"])
    def test_identifier_without_separator_is_literal(self, translator, memory_loader, language):
        """Identifiers without "_" are formatted, never looked up."""
        translator.set_current_language(language)
        assert translator.translate("50%% off") == "50% off"
        assert memory_loader.calls == []

    def test_none_identifier(self, translator):
        """None is treated as an empty string."""
        assert translator.translate(None) == ""

    def test_static_percent_unescaped(self, translator):
        """Without args, %% collapses to %."""
        assert translator.translate("General_Static") == "100% done"

    def test_translate_with_args_list(self, translator):
        """A list of args is applied positionally."""
        assert translator.translate("General_VisitsOn", ["5", "Monday"]) == "5 visits on Monday"

    def test_translate_with_single_arg(self, translator):
        """A scalar arg is wrapped into a single positional argument."""
        assert translator.translate("General_Percent", 50) == "50%"

    def test_translate_with_string_arg(self, translator):
        """A string arg is a single argument, not a sequence of characters."""
        assert translator.translate("General_Percent", "ab") == "ab%"

    def test_translate_with_tuple_args(self, translator):
        """A tuple of args is applied positionally."""
        assert translator.translate("General_VisitsOn", ("3", "Friday"), "de") == "3 Besuche am Friday"

    def test_translate_too_few_args_raises(self, translator):
        """Too few args for the placeholders raises FormatError."""
        with pytest.raises(FormatError):
            translator.translate("General_VisitsOn", ["5"])

    def test_translate_unknown_specifier_raises(self, memory_loader):
        """A stray percent sign in a text formatted with args raises FormatError."""
        memory_loader.messages_by_language["en"]["General"]["Rate"] = "%s at 50% off"
        translator = make_translator(loader=memory_loader)
        with pytest.raises(FormatError):
            translator.translate("General_Rate", ["Shoes"])

    def test_key_containing_underscores(self, memory_loader):
        """Only the first underscore separates the domain."""
        memory_loader.messages_by_language["en"]["CoreHome"] = {"Period_Day": "Day"}
        translator = make_translator(loader=memory_loader)
        assert translator.translate("CoreHome_Period_Day") == "Day"


class TestFallbackResolution:
    """Tests for the fallback chain."""

    def test_fallback_to_english(self, translator):
        """A key missing in German resolves from English."""
        translator.set_current_language("de")
        assert translator.translate("General_OnlyInEnglish") == "Only in English"

    def test_fallback_for_unknown_language(self, translator, memory_loader):
        """A language without data resolves from English and is cached empty."""
        assert translator.translate("General_Date", language="xx") == "Date"
        assert translator.is_loaded("xx")
        assert translator.catalogs["xx"].is_empty()

        translator.translate("General_Visits", language="xx")
        assert [call[0] for call in memory_loader.calls].count("xx") == 1

    def test_legacy_intl_alias(self, translator):
        """Keys migrated to Intl still resolve under their old domain."""
        assert translator.translate("CoreHome_Today") == "Today"
        assert translator.translate("CoreHome_Today", language="de") == "Heute"

    def test_own_domain_wins_over_intl(self, memory_loader):
        """An entry in the original domain wins over the Intl alias."""
        memory_loader.messages_by_language["en"]["CoreHome"] = {"Today": "Today (home)"}
        translator = make_translator(loader=memory_loader)
        assert translator.translate("CoreHome_Today") == "Today (home)"

    def test_intl_alias_in_requested_language_before_fallback(self, memory_loader):
        """The Intl alias of the requested language wins over the fallback language."""
        memory_loader.messages_by_language["en"]["CoreHome"] = {"Today": "Today (home)"}
        translator = make_translator(loader=memory_loader)
        assert translator.translate("CoreHome_Today", language="de") == "Heute"

    def test_intl_alias_through_fallback(self, translator):
        """An Intl key missing in German resolves from English Intl."""
        assert translator.translate("CoreHome_Yesterday", language="de") == "Yesterday"

    def test_unknown_identifier_returned_unchanged(self, translator):
        """A completely unknown identifier is returned as is."""
        assert translator.translate("Unknown_Key") == "Unknown_Key"
        assert translator.translate("Unknown_Key", language="de") == "Unknown_Key"

    def test_unknown_identifier_idempotent(self, translator):
        """Translating an unknown identifier twice gives the same result."""
        once = translator.translate("Missing_Thing")
        assert translator.translate(once) == once

    def test_english_loaded_once(self, translator, memory_loader):
        """Repeated lookups load each language only once."""
        translator.set_current_language("de")
        translator.translate("General_OnlyInEnglish")
        translator.translate("General_OnlyInEnglish")
        translator.translate("General_Date")
        assert [call[0] for call in memory_loader.calls] == ["de", "en"]

    def test_loader_errors_propagate(self):
        """Failures of the loader are not suppressed."""
        loader = MagicMock()
        loader.load.side_effect = ValueError("broken file")
        translator = make_translator(loader=loader)
        with pytest.raises(ValueError):
            translator.translate("General_Date")


class TestDirectories:
    """Tests for add_directory() and reset()."""

    def test_add_directory_appends(self, translator):
        """add_directory() appends a new directory."""
        translator.add_directory("/plugins/lang")
        assert translator.get_directories() == ["/lang", "/plugins/lang"]

    def test_add_existing_directory_keeps_list(self, translator):
        """Adding a known directory does not duplicate it."""
        translator.add_directory("/lang")
        assert translator.get_directories() == ["/lang"]

    def test_add_directory_invalidates_cache(self):
        """Cached languages are reloaded after add_directory(), even for a known directory."""
        loader = MagicMock()
        loader.load.return_value = make_messages("en")
        translator = make_translator(loader=loader)

        assert translator.translate("General_Date") == "Date"
        assert loader.load.call_count == 1

        translator.add_directory("/lang")
        assert translator.catalogs == {}

        assert translator.translate("General_Date") == "Date"
        assert loader.load.call_count == 2
        loader.load.assert_called_with("en", ["/lang"])

    def test_new_directory_overrides(self, temp_translations_dir, plugin_translations_dir):
        """A directory added later overrides earlier keys."""
        translator = Translator(
            YAMLTranslationLoader(),
            directories=[str(temp_translations_dir)],
        )
        assert translator.translate("General_Date") == "Date"

        translator.add_directory(str(plugin_translations_dir))
        assert translator.translate("General_Date") == "Day"
        assert translator.translate("MyPlugin_Title") == "My Plugin"

    def test_reset(self, memory_loader):
        """reset() restores language, directories and clears catalogs."""
        translator = make_translator(loader=memory_loader, default_language="de")
        translator.set_current_language("fr")
        translator.add_directory("/extra")
        translator.translate("General_Date")

        translator.reset()

        assert translator.get_current_language() == "de"
        assert translator.get_directories() == ["/lang"]
        assert translator.catalogs == {}


class TestReverseLookup:
    """Tests for get_all_translations() and find_translation_key_for_translation()."""

    def test_get_all_translations(self, translator):
        """get_all_translations() returns the current language's messages."""
        translator.set_current_language("de")
        assert translator.get_all_translations() == make_messages("de")

    def test_get_all_translations_empty_language(self, translator):
        """A language without data yields an empty mapping."""
        translator.set_current_language("xx")
        assert translator.get_all_translations() == {}

    def test_get_all_translations_returns_copy(self, temp_translations_dir):
        """Mutating the returned mapping leaves loaded and cached translations intact."""
        translator = Translator(
            YAMLTranslationLoader(use_cache=True),
            directories=[str(temp_translations_dir)],
        )
        messages = translator.get_all_translations()
        messages["General"]["Date"] = "Changed"
        messages.clear()

        assert translator.translate("General_Date") == "Date"

        translator.add_directory(str(temp_translations_dir))
        assert translator.translate("General_Date") == "Date"
        assert translator.get_all_translations()["General"]["Date"] == "Date"

    def test_find_translation_key(self, translator):
        """The identifier of an exact text match is returned."""
        assert translator.find_translation_key_for_translation("Visits") == "General_Visits"

    def test_find_translation_key_in_current_language(self, translator):
        """The lookup uses the current language only."""
        translator.set_current_language("de")
        assert translator.find_translation_key_for_translation("Datum") == "General_Date"
        assert translator.find_translation_key_for_translation("Only in English") is None

    def test_find_translation_key_missing(self, translator):
        """No match returns None."""
        assert translator.find_translation_key_for_translation("No such text") is None

    def test_find_translation_key_first_match(self):
        """With duplicate texts, the first key in catalog order wins."""
        loader = InMemoryTranslationLoader(
            {"en": {"A": {"x": "same"}, "B": {"y": "same"}}}
        )
        translator = make_translator(loader=loader)
        assert translator.find_translation_key_for_translation("same") == "A_x"


class TestClean:
    """Tests for Translator.clean()."""

    def test_clean_is_static(self):
        """clean() works without an instance."""
        assert Translator.clean("  &amp;&quot;  ") == '&"'


class TestConcurrentLoading:
    """Tests for concurrent first access."""

    def test_language_loaded_once_under_concurrency(self):
        """Concurrent first lookups load a language only once."""
        barrier = threading.Barrier(8)
        loader = InMemoryTranslationLoader()
        translator = make_translator(loader=loader)
        results = []

        def worker():
            barrier.wait()
            results.append(translator.translate("General_Date"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == ["Date"] * 8
        assert [call[0] for call in loader.calls] == ["en"]
