"""Translation loading interface and implementations.

Defines the contract for loading translations and provides JSON and YAML
file loaders.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import yaml

import structlog
from infrastructure.i18n.models import Messages, copy_messages

logger = structlog.get_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations return a nested mapping ``{domain: {key: text}}`` for a
    language, merged from the given directories. Results must be deterministic
    for fixed inputs. A language without data yields an empty mapping.
    """

    @abstractmethod
    def load(self, language: str, directories: Sequence[str]) -> Messages:
        """Load translations for a language.

        Args:
            language: Language code (e.g., "en", "de").
            directories: Directories to search, in priority order. Later
                directories override earlier ones.

        Returns:
            Nested dict of domain -> key -> text.

        Raises:
            ValueError: If a translation file cannot be parsed.
        """
        pass


class FileTranslationLoader(TranslationLoader):
    """Shared merge and cache logic for file based loaders.

    Attributes:
        use_cache: Whether parsed results are kept in memory.
        cache: Loaded results keyed by (language, directories).
    """

    def __init__(self, use_cache: bool = True):
        self.use_cache = use_cache
        self.cache: Dict[Tuple[str, Tuple[str, ...]], Messages] = {}

    def load(self, language: str, directories: Sequence[str]) -> Messages:
        """Load and merge translation files for a language.

        Missing directories and files are skipped.

        Args:
            language: Language code to load.
            directories: Directories to search, in priority order.

        Returns:
            Merged nested dict of domain -> key -> text.
        """
        cache_key = (language, tuple(str(d) for d in directories))
        if self.use_cache and cache_key in self.cache:
            logger.debug("loaded_from_cache", language=language)
            return copy_messages(self.cache[cache_key])

        messages: Messages = {}
        files: List[Path] = []
        for directory in directories:
            for path in self._find_files(Path(directory), language):
                self._merge_data(messages, self._parse(path), path)
                files.append(path)

        logger.info(
            "loaded_translations",
            language=language,
            file_count=len(files),
            domain_count=len(messages),
        )

        if self.use_cache:
            self.cache[cache_key] = copy_messages(messages)

        return messages

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")

    @abstractmethod
    def _find_files(self, directory: Path, language: str) -> List[Path]:
        """Return the files holding translations for a language."""

    @abstractmethod
    def _parse(self, path: Path) -> Any:
        """Parse a single translation file."""

    def _merge_data(self, messages: Messages, data: Any, source_file: Path) -> None:
        """Merge parsed file data into messages.

        Expected format:
        Domain:
          Key1: text1
          Key2: text2

        Args:
            messages: Mapping to merge into.
            data: Parsed file content.
            source_file: Source file (for logging).
        """
        if data is None:
            return

        if not isinstance(data, dict):
            logger.warning(
                "invalid_translation_format", file=str(source_file), expected="dict"
            )
            return

        for domain, entries in data.items():
            if not isinstance(entries, dict):
                logger.warning(
                    "invalid_domain_format",
                    file=str(source_file),
                    domain=domain,
                    expected="dict",
                )
                continue

            target = messages.setdefault(str(domain), {})
            for key, text in entries.items():
                target[str(key)] = "" if text is None else str(text)


class JSONTranslationLoader(FileTranslationLoader):
    """Loader for JSON translation files named ``<language>.json``.

    Each file holds ``{"Domain": {"Key": "text"}}``.
    """

    def _find_files(self, directory: Path, language: str) -> List[Path]:
        path = directory / f"{language}.json"
        if not path.is_file():
            logger.debug("translation_file_missing", file=str(path))
            return []
        return [path]

    def _parse(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e


class YAMLTranslationLoader(FileTranslationLoader):
    """Loader for YAML translation files.

    Reads ``<language>.yml`` followed by ``<domain>.<language>.yml`` files
    (sorted by name) from each directory.
    """

    def _find_files(self, directory: Path, language: str) -> List[Path]:
        if not directory.is_dir():
            logger.debug("translation_directory_missing", directory=str(directory))
            return []

        files = []
        main_file = directory / f"{language}.yml"
        if main_file.is_file():
            files.append(main_file)
        files.extend(sorted(directory.glob(f"*.{language}.yml")))
        return files

    def _parse(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e
