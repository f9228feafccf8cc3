"""Translation models for i18n system.

Defines core data structures for managing translations and identifiers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

# Language used when a key is missing in the requested language.
FALLBACK_LANGUAGE = "en"

# Shared domain that keys were historically migrated into.
LEGACY_DOMAIN = "Intl"

SEPARATOR = "_"

Messages = Dict[str, Dict[str, str]]


def copy_messages(messages: Messages) -> Messages:
    """Return a copy of messages that shares no mutable state with the source."""
    return {domain: dict(entries) for domain, entries in messages.items()}


class FormatError(ValueError):
    """Raised when a translation template cannot be formatted with its args."""


class ListType(str, Enum):
    """Kind of grammatical list built by the listing helpers."""

    AND = "And"
    OR = "Or"

    def pattern_id(self, suffix: str) -> str:
        """Build the identifier of a list pattern (e.g. "Intl_ListPatternAnd2").

        Args:
            suffix: One of "2", "Start", "Middle", "End".

        Returns:
            Fully qualified pattern identifier.
        """
        return f"{LEGACY_DOMAIN}{SEPARATOR}ListPattern{self.value}{suffix}"


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation identifier of the form ``domain_key``.

    The domain is taken up to the first underscore; the key is the remainder
    and may contain underscores itself. Frozen for hashability.

    Attributes:
        domain: Owning domain (e.g., "General", "Intl").
        key: Message key within the domain (e.g., "Date", "ListPatternAnd2").
    """

    domain: str
    key: str

    def __str__(self) -> str:
        """Return the full identifier (e.g., "General_Date")."""
        return f"{self.domain}{SEPARATOR}{self.key}"

    @staticmethod
    def is_qualified(identifier: Optional[str]) -> bool:
        """Check whether an identifier contains a domain separator.

        Args:
            identifier: Identifier to inspect.

        Returns:
            True if the identifier can be split into domain and key.
        """
        return bool(identifier) and SEPARATOR in identifier

    @classmethod
    def from_string(cls, identifier: str) -> "TranslationKey":
        """Create TranslationKey from a ``domain_key`` string.

        Args:
            identifier: Identifier (e.g., "General_Date").

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If identifier does not contain a separator.
        """
        if not cls.is_qualified(identifier):
            raise ValueError(
                f"Translation identifier must be in format 'domain_key': {identifier}"
            )
        domain, key = identifier.split(SEPARATOR, 1)
        return cls(domain=domain, key=key)


@dataclass
class TranslationCatalog:
    """Container for the translations of a single language.

    Attributes:
        language: Language code this catalog is for (e.g., "en", "de").
        messages: Nested dict structure {domain: {key: text}}.
    """

    language: str
    messages: Messages = field(default_factory=dict)

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a message by key.

        Args:
            key: TranslationKey with domain and key.

        Returns:
            Translated text, or None if not found.
        """
        return self.messages.get(key.domain, {}).get(key.key)

    def has_message(self, key: TranslationKey) -> bool:
        """Check if a message exists for the given key."""
        return key.key in self.get_domain(key.domain)

    def get_domain(self, domain: str) -> Dict[str, str]:
        """Get all messages for a specific domain.

        Args:
            domain: Domain identifier (e.g., "General").

        Returns:
            Dictionary of all messages in the domain.
        """
        return self.messages.get(domain, {})

    def iter_messages(self) -> Iterator[Tuple[TranslationKey, str]]:
        """Iterate over every (key, text) pair in insertion order."""
        for domain, messages in self.messages.items():
            for key, text in messages.items():
                yield TranslationKey(domain=domain, key=key), text

    def is_empty(self) -> bool:
        """Check whether the catalog holds no messages at all."""
        return not any(self.messages.values())
